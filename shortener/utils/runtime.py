"""Runtime utilities

Functions:
    running_locally() -> bool:
        True if the service runs on a developer machine, False otherwise.

Example:
    >>> from shortener.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
    >>> os.environ['APP_ENV'] = 'dev'
    >>> running_locally()
    False
"""

import os

from shortener.utils.constants import APP_ENV_ENV


def running_locally() -> bool:
    """Check if the service is explicitly configured as local (APP_ENV=local)

    Returns:
        bool: True if running locally, False otherwise.
    """
    return os.getenv(APP_ENV_ENV, '').lower() == 'local'
