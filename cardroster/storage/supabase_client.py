# cardroster/storage/supabase_client.py
from typing import Optional

from loguru import logger
from supabase import create_async_client, AsyncClient

from cardroster.config.settings import settings

# Module-level storage for the async client instance
_async_supabase_client: Optional[AsyncClient] = None


async def initialize_supabase() -> Optional[AsyncClient]:
    """Initializes the global ASYNC Supabase client and returns it.

    Returns None when storage is not configured; callers then fall back to
    built-in defaults.
    """
    global _async_supabase_client
    if _async_supabase_client:
        logger.debug("Async Supabase client already initialized.")
        return _async_supabase_client

    if not settings.storage_configured:
        logger.warning("Supabase URL or Key not configured; object storage disabled.")
        return None

    logger.debug(
        f"Attempting to initialize Async Supabase client with URL: {settings.supabase_url}"
    )
    try:
        client: AsyncClient = await create_async_client(
            settings.supabase_url, settings.supabase_key
        )
        _async_supabase_client = client
        logger.success("Async Supabase client initialized successfully.")
        return client
    except Exception as e:
        logger.exception(f"Failed to initialize Async Supabase client: {e}")
        return None


async def download_object(client: AsyncClient, key: str) -> bytes:
    """Downloads one object from the configured bucket."""
    logger.debug(f"Downloading {settings.storage_bucket}/{key}")
    return await client.storage.from_(settings.storage_bucket).download(key)
