"""Shortener application: one store, one sweeper, and request routing.

The application object owns all state. Nothing lives at module level, so any
number of independent applications can run side by side in one process
(which is what the test suite does).

Routes:
    /api/shorten       -> shorten_url handler (POST only)
    /                  -> landing page
    /{shortcode}       -> redirect_url handler

Example:
    >>> from shortener.app import ShortenerApp
    >>> with ShortenerApp() as app:
    ...     response = app.handle({'httpMethod': 'POST', 'path': '/api/shorten', 'body': '{"url": "https://example.com"}'})
    ...     json.loads(response['body'])['short_code']
    '1'
"""

import logging
from datetime import timedelta
from pathlib import Path

from shortener.dao.base import EntryBaseDAO
from shortener.dao.memory import EntryMemoryDAO
from shortener.handlers import shorten_url, redirect_url
from shortener.sweeper import ExpirySweeper
from shortener.types import ProxyEvent, ProxyContext, ProxyResponse
from shortener.utils import app_env, app_name
from shortener.utils.constants import SHORTEN_PATH, SWEEP_INTERVAL


logger = logging.getLogger(__name__)


class ShortenerApp:
    """URL shortener service with explicit lifecycle.

    Attributes:
        dao (EntryBaseDAO):
            Store for short URLs. A fresh EntryMemoryDAO unless one is given.
        sweeper (ExpirySweeper):
            Background task removing expired entries from `dao`.
        landing_page (Path | None):
            Landing page template. None uses the packaged template.

    Methods:
        start() -> ShortenerApp:
            Start the expiry sweeper.
        shutdown(timeout: float | None = None) -> None:
            Stop the expiry sweeper.
        handle(event: ProxyEvent, context: ProxyContext = None) -> ProxyResponse:
            Route a proxy event to its request handler.
    """

    def __init__(
        self,
        dao: EntryBaseDAO | None = None,
        *,
        sweep_interval: timedelta = SWEEP_INTERVAL,
        landing_page: Path | None = None,
    ):
        self.dao = dao if dao is not None else EntryMemoryDAO()
        self.sweeper = ExpirySweeper(self.dao, interval=sweep_interval)
        self.landing_page = landing_page

    def start(self) -> 'ShortenerApp':
        logger.info('Starting URL shortener.', extra={'appName': app_name(), 'appEnv': app_env()})
        self.sweeper.start()
        return self

    def shutdown(self, timeout: float | None = None) -> None:
        logger.info('Shutting down URL shortener.', extra={'appName': app_name(), 'appEnv': app_env()})
        self.sweeper.stop(timeout)

    def handle(self, event: ProxyEvent, context: ProxyContext = None) -> ProxyResponse:
        if event.get('path') == SHORTEN_PATH:
            return shorten_url.handler(event, self.dao)
        return redirect_url.handler(event, self.dao, self.landing_page)

    def __enter__(self) -> 'ShortenerApp':
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.shutdown()
