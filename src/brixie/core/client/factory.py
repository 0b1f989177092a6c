"""
Factory for RebrickableClient instances.

Applications that prefer one process-wide client can use
``RebrickableApi.get_instance()``; everything else should build and own a
RebrickableClient directly or via ``create_instance``.
"""

import logging
import threading
from typing import Optional

from brixie.config.settings import BrixieSettings
from .providers import StaticKeyProvider
from .rebrickable_client import RebrickableClient

logger = logging.getLogger(__name__)


class RebrickableApi:
    """Creates clients and holds the lazily-built shared one."""

    _instance: Optional[RebrickableClient] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls, settings: Optional[BrixieSettings] = None) -> RebrickableClient:
        """Return the shared client, building it from settings on first use.

        ``settings`` is only consulted by the call that builds the instance.
        """
        instance = cls._instance
        if instance is None:
            with cls._lock:
                instance = cls._instance
                if instance is None:
                    instance = RebrickableClient.from_settings(settings)
                    cls._instance = instance
                    logger.debug("Created shared Rebrickable client")
        return instance

    @classmethod
    def create_instance(
        cls,
        api_key: str,
        settings: Optional[BrixieSettings] = None,
    ) -> RebrickableClient:
        """Build a new, independent client using the given API key."""
        return RebrickableClient.from_settings(
            settings,
            key_provider=StaticKeyProvider(api_key),
        )

    @classmethod
    async def reset_instance(cls) -> None:
        """Close and forget the shared client."""
        with cls._lock:
            instance = cls._instance
            cls._instance = None
        if instance is not None:
            await instance.close()
