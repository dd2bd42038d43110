from functools import lru_cache

from eighty_twenty.config import AppConfig, load_config


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Application config, built once per process (overridable in tests)."""
    return load_config()
