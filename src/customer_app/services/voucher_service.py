"""Service for discount vouchers."""
import logging
from typing import List, Optional

from customer_app.database.models import Voucher
from customer_app.database.queries import select_one, select_rows

logger = logging.getLogger(__name__)

# The vouchers table marks listable rows "enable" and redeemable ones "active"
LISTED_STATUS = "enable"
REDEEMABLE_STATUS = "active"


class VoucherService:
    """
    Read vouchers offered at checkout.

    Methods:
    - get_active_vouchers(): Listable vouchers, newest first
    - get_voucher_by_id(): One redeemable voucher, or None
    """

    @staticmethod
    async def get_active_vouchers(_: Optional[object] = None) -> List[Voucher]:
        vouchers = await select_rows(
            "vouchers",
            filters={"status": LISTED_STATUS},
            order_by="created_at",
            desc=True,
            model=Voucher,
        )
        logger.info(f"Fetched {len(vouchers)} active vouchers")
        return vouchers

    @staticmethod
    async def get_voucher_by_id(voucher_id: int) -> Optional[Voucher]:
        return await select_one(
            "vouchers",
            filters={"id": voucher_id, "status": REDEEMABLE_STATUS},
            model=Voucher,
        )
