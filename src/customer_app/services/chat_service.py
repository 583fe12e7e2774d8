"""Service for conversations and messages between customers and providers."""
import logging
from datetime import datetime
from typing import Dict, List, Optional

from customer_app.database.models import Conversation, Message, User
from customer_app.database.queries import insert_row, select_one, select_rows, update_rows
from customer_app.utils.date_time_utils import get_local_now

logger = logging.getLogger(__name__)


class ChatService:
    """
    Read and write the messages table.

    Methods:
    - get_conversations(): One Conversation per chat partner, newest first
    - get_messages(): Messages between two users, oldest first
    - send_message(): Insert a message
    - mark_messages_as_seen(): Stamp seen_at on unread messages
    """

    @staticmethod
    async def get_user(user_id: str) -> Optional[User]:
        """User row by id, or None"""
        return await select_one("users", filters={"id": user_id}, model=User)

    @staticmethod
    async def get_conversations(current_user_id: str) -> List[Conversation]:
        """
        Group the user's messages by chat partner.

        Args:
            current_user_id: users.id of the signed-in user

        Returns:
            Conversations sorted by last message time, newest first. Partners
            without a users row are skipped.
        """
        messages = await select_rows(
            "messages",
            or_filter=f"sender_id.eq.{current_user_id},receiver_id.eq.{current_user_id}",
            order_by="created_at",
            desc=True,
            model=Message,
        )

        # Insertion order keeps the newest message first within each partner
        by_partner: Dict[str, List[Message]] = {}
        for message in messages:
            if message.sender_id == current_user_id:
                other_id = message.receiver_id or ""
            else:
                other_id = message.sender_id or ""
            if other_id:
                by_partner.setdefault(other_id, []).append(message)

        conversations = []
        for other_id, partner_messages in by_partner.items():
            other_user = await ChatService.get_user(other_id)
            if other_user is None:
                logger.warning(f"Skipping conversation with unknown user {other_id}")
                continue

            last_message = partner_messages[0]
            unread_count = sum(
                1
                for m in partner_messages
                if m.receiver_id == current_user_id and m.seen_at is None
            )
            conversations.append(
                Conversation(
                    other_user=other_user,
                    last_message=last_message,
                    unread_count=unread_count,
                    last_message_time=last_message.created_at,
                )
            )

        conversations.sort(key=lambda c: c.last_message_time or "", reverse=True)
        return conversations

    @staticmethod
    async def get_messages(user_id: str, other_id: str) -> List[Message]:
        """Messages exchanged between two users, oldest first"""
        return await select_rows(
            "messages",
            or_filter=(
                f"and(sender_id.eq.{user_id},receiver_id.eq.{other_id}),"
                f"and(sender_id.eq.{other_id},receiver_id.eq.{user_id})"
            ),
            order_by="created_at",
            model=Message,
        )

    @staticmethod
    async def send_message(message: Message) -> Message:
        """Insert a message and return the stored row"""
        return await insert_row("messages", message, model=Message)

    @staticmethod
    async def mark_messages_as_seen(
        sender_id: str, receiver_id: str, seen_at: Optional[datetime] = None
    ) -> int:
        """
        Mark every unread message from sender to receiver as seen.

        Returns:
            Number of rows updated
        """
        stamp = (seen_at or get_local_now()).isoformat()
        rows = await update_rows(
            "messages",
            {"seen_at": stamp},
            {"sender_id": sender_id, "receiver_id": receiver_id, "seen_at": None},
        )
        return len(rows)
