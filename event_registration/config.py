"""Runtime configuration read from the environment and an optional .env file."""
import os
from threading import Lock

from dotenv import load_dotenv

DEFAULT_REGISTRATIONS_FILE = "data/registrations.json"
DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_SESSION_TTL_MINUTES = 60

_ENV_LOADED = False
_ENV_LOCK = Lock()


def load_env() -> None:
    """Load variables from .env once; existing environment values win."""
    global _ENV_LOADED

    if _ENV_LOADED:
        return

    with _ENV_LOCK:
        if _ENV_LOADED:
            return
        load_dotenv(override=False)
        _ENV_LOADED = True


def get_registrations_file() -> str:
    """Path of the JSON document holding all registrations."""
    load_env()
    return os.getenv("REGISTRATIONS_FILE", DEFAULT_REGISTRATIONS_FILE)


def get_admin_username() -> str:
    load_env()
    return os.getenv("ADMIN_USERNAME", DEFAULT_ADMIN_USERNAME)


def get_admin_password() -> str:
    """Configured admin password, or an empty string if none is set."""
    load_env()
    return os.getenv("ADMIN_PASSWORD", "")


def get_session_ttl_minutes() -> int:
    """
    Lifetime of an admin session token.

    Falls back to the default when the variable is unset, not an integer,
    or not positive.
    """
    load_env()
    raw = os.getenv("ADMIN_SESSION_TTL_MINUTES", "")
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_SESSION_TTL_MINUTES
    return value if value > 0 else DEFAULT_SESSION_TTL_MINUTES


def get_log_level() -> str:
    load_env()
    return os.getenv("LOG_LEVEL", "INFO").upper()
