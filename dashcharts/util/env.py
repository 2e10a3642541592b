import os

from dotenv import load_dotenv

_loaded = False


def get_env(key: str, default: str) -> str:
    """Optional variable with a fallback; empty strings count as unset."""
    global _loaded
    if not _loaded:
        load_dotenv(override=True)
        _loaded = True

    val = os.getenv(key)
    return val if val else default
