"""Provider functions for process-wide infrastructure objects."""

from functools import lru_cache

from infrastructure.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings, loading it on first call.

    Nothing in the package instantiates Settings at import time; modules
    that need configuration call this. Tests that change the environment
    call ``get_settings.cache_clear()`` to force a reload.
    """
    return Settings()
