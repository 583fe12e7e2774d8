"""Supabase client setup"""

import logging
from typing import Optional
from supabase import create_client, Client

from customer_app.config import config

logger = logging.getLogger(__name__)


class SupabaseClient:
    """Process-wide Supabase client shared by every remote query"""

    _instance: Optional[Client] = None

    @classmethod
    def get_client(
        cls, supabase_url: Optional[str] = None, supabase_key: Optional[str] = None
    ) -> Client:
        """
        Get or lazily create the Supabase client.

        Args:
            supabase_url: Project URL, defaults to SUPABASE_URL
            supabase_key: API key, defaults to SUPABASE_KEY

        Returns:
            Client: Supabase client instance
        """
        if cls._instance is None:
            url = supabase_url or config.supabase_url
            key = supabase_key or config.supabase_key
            if not url or not key:
                raise ValueError(
                    "SUPABASE_URL and SUPABASE_KEY must be set before the first query"
                )

            cls._instance = create_client(url, key)
            logger.info(f"Supabase client initialized for {url}")

        return cls._instance

    @classmethod
    def reset(cls):
        """Drop the cached client (used by tests)"""
        cls._instance = None
