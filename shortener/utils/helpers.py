"""Helper utilities for request handlers and the entry store.

Functions:
    utcnow() -> datetime
        Default clock: current timezone-aware UTC time
    base_url() -> str
        Extract public base URL from a proxy event
    get_short_url() -> str
        Get string representation of short URL for a given shortcode
    guarantee_500_response(handler) -> Callable
        Decorator: turn unexpected handler exceptions into HTTP 500 responses

Example:
    Typical usage inside a request handler:

        >>> from shortener.utils.helpers import base_url
        >>> event = {'headers': {'Host': 'sho.rt'}}
        >>> base_url(event)
        'https://sho.rt'

        >>> base_url({'headers': {'Host': 'localhost:8080'}})
        'http://localhost:8080'

        >>> base_url({})
        'http://localhost:8080'
"""

import json
import logging
import functools
from datetime import datetime, UTC
from typing import Any
from collections.abc import Callable

from shortener.utils.constants import DEFAULT_BASE_URL
from shortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(UTC)


def base_url(event: dict[str, Any]) -> str:
    """Extract public base URL from a proxy event

    Uses the Host header of the incoming request. Local hosts are served over
    plain HTTP, everything else is assumed to sit behind TLS.

    Args:
        event (dict): proxy event passed to the request handler

    Returns:
        str: Base URL, e.g.:
             - "https://sho.rt"
             - "http://localhost:8080"
    """
    headers = event.get('headers') or {}
    host = headers.get('Host') or headers.get('host') or ''

    if not host:
        return DEFAULT_BASE_URL
    elif host.split(':')[0] in {'localhost', '127.0.0.1'}:
        return f'http://{host}'
    else:
        return f'https://{host}'


def get_short_url(shortcode: str, event: dict[str, Any]) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        event (dict): proxy event passed to the request handler

    Returns:
        str: short url string representation
    """
    return f'{base_url(event).rstrip("/")}/{shortcode}'


def guarantee_500_response(handler: Callable[..., dict]) -> Callable[..., dict]:
    """Decorator: respond with HTTP 500 instead of leaking exceptions to the transport

    Args:
        handler (Callable[..., dict]):
            Request handler returning a proxy response.

    Returns:
        Callable[..., dict]:
            Wrapped handler. Any exception escaping the handler is logged and
            converted into a 500 JSON response. With APP_ENV=local the
            exception is re-raised instead, to surface the traceback.

    Example:
        >>> @guarantee_500_response
        ... def handler(event, dao):
        ...     raise RuntimeError('boom')
        >>> handler({}, None)['statusCode']
        500
    """

    @functools.wraps(handler)
    def wrapper(*args, **kwargs) -> dict:
        try:
            return handler(*args, **kwargs)
        except Exception:
            if running_locally():
                raise
            logger.exception('Unhandled error in request handler. Responding with 500.', extra={'handler': handler.__module__})
            return {
                'statusCode': 500,
                'headers': {'Content-Type': 'application/json'},
                'body': json.dumps({'error': 'Internal Server Error'}),
            }

    return wrapper
