"""
Runtime Configuration

Reads deployment settings from environment variables once at import time.
Every variable is prefixed with STOREFRONT_ and has a default suitable for
a local single-user install.

Includes:
- Database location and SQL echo
- Log directory and level
- Server bind address and CORS origins
"""
import os
from pathlib import Path


def env_flag(name: str, default: str = 'false') -> bool:
    """
    Read a boolean environment variable.

    Returns:
        True if the variable is set to 'true', '1' or 'yes' (case-insensitive)
    """
    return os.environ.get(name, default).strip().lower() in ('true', '1', 'yes')


def env_list(name: str, default: str = '') -> list[str]:
    """Read a comma-separated environment variable into a list of strings."""
    raw = os.environ.get(name, default)
    return [item.strip() for item in raw.split(',') if item.strip()]


# Application data lives outside the source tree
DATA_DIR = Path(os.environ.get('STOREFRONT_DATA_DIR', Path.home() / '.storefront'))

DATABASE_URL = os.environ.get(
    'STOREFRONT_DATABASE_URL',
    f"sqlite:///{DATA_DIR / 'storefront.db'}"
)
SQL_ECHO = env_flag('STOREFRONT_SQL_ECHO')

LOG_DIR = Path(os.environ.get('STOREFRONT_LOG_DIR', DATA_DIR / 'logs'))
LOG_LEVEL = os.environ.get('STOREFRONT_LOG_LEVEL', 'INFO').upper()

HOST = os.environ.get('STOREFRONT_HOST', '0.0.0.0')
PORT = int(os.environ.get('STOREFRONT_PORT', '8000'))
CORS_ORIGINS = env_list('STOREFRONT_CORS_ORIGINS', '*')
