"""Service for reading the provider/service catalog."""
import logging
from typing import List, Optional

from customer_app.database.models import ProviderService, ServiceType
from customer_app.database.queries import select_one, select_rows

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Read provider offerings and service types.

    Methods:
    - get_providers_by_service_id(): Active providers offering a service
    - get_provider_service_by_id(): One offering with provider and service
    - get_service_types(): service_type column of bookings
    """

    @staticmethod
    async def get_providers_by_service_id(service_id: int) -> List[ProviderService]:
        """
        Active provider offerings for a catalog service.

        Args:
            service_id: services.id

        Returns:
            Offerings with the provider's user row embedded
        """
        providers = await select_rows(
            "provider_services",
            columns="*, user:users(*)",
            filters={"service_id": service_id, "is_active": True},
            model=ProviderService,
        )
        logger.info(f"Fetched {len(providers)} providers for service {service_id}")
        return providers

    @staticmethod
    async def get_provider_service_by_id(
        provider_service_id: int,
    ) -> Optional[ProviderService]:
        """Single offering with its provider and catalog service, or None"""
        return await select_one(
            "provider_services",
            columns="*, user:users(*), service:services(*)",
            filters={"id": provider_service_id},
            model=ProviderService,
        )

    @staticmethod
    async def get_service_types(_: Optional[object] = None) -> List[ServiceType]:
        """service_type of every booking, in backend order"""
        return await select_rows("bookings", columns="service_type", model=ServiceType)
