"""Utility functions for application configuration.

The shortener keeps no configuration files. Its behavior is fixed by the
constants in `shortener.utils.constants`; the few deployment-specific values
are read from environment variables.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    project_root() -> Path
        Return the directory holding the `templates` folder, using `PROJECT_ROOT`
        when available.

    templates_dir() -> Path
        Return the directory holding the HTML templates.

    landing_page_path() -> Path
        Return the path to the landing page template.

Example:
        >>> from shortener.utils.config import landing_page_path
        >>> os.environ['PROJECT_ROOT'] = '/srv/shortener'
        >>> landing_page_path()
        PosixPath('/srv/shortener/templates/index.html')
"""

import os
from pathlib import Path

from shortener.utils.constants import (
    APP_ENV_ENV,
    APP_NAME_ENV,
    PROJECT_ROOT_ENV,
    TEMPLATES_DIRNAME,
    LANDING_PAGE_FILENAME,
)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(APP_ENV_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'

    Returns:
        str:
            Value of `APP_NAME` environment variable.
            None if variable is not set.
    """
    return os.environ.get(APP_NAME_ENV)


def project_root() -> Path:
    """Return the absolute path to the project root directory

    Reads the PROJECT_ROOT environment variable.
    Falls back to the installed `shortener` package directory.

    Returns:
        Path:
            Absolute path to the project root directory.
    """
    return Path(os.environ.get(PROJECT_ROOT_ENV, Path(__file__).resolve().parent.parent))


def templates_dir() -> Path:
    return project_root() / TEMPLATES_DIRNAME


def landing_page_path() -> Path:
    return templates_dir() / LANDING_PAGE_FILENAME
