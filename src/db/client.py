"""Supabase client construction."""

import logging

from supabase import Client, create_client

from ..config import Settings


logger = logging.getLogger(__name__)


def create_supabase_client(settings: Settings) -> Client:
    """
    Create a client for the hosted database.

    Args:
        settings: Settings with the project URL and anonymous key.

    Returns:
        Supabase client.

    Raises:
        ConfigurationError: If the URL or key is missing.
    """
    settings.require_database()
    logger.info("Connecting to Supabase at %s", settings.supabase_url)
    return create_client(settings.supabase_url, settings.supabase_key)
