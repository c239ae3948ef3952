import logging
from pathlib import Path

from shortener.dao.base import EntryBaseDAO
from shortener.dao.exceptions import ShortURLNotFoundError
from shortener.types import ProxyEvent, ProxyResponse
from shortener.utils import get_short_url, guarantee_500_response
from shortener.handlers import landing_page
from shortener.handlers.responses import response_302, response_404
from shortener.handlers.constants import SHORT_URL_NOT_FOUND, REDIRECT_SUCCESS, NOT_FOUND_MESSAGE


logger = logging.getLogger(__name__)


def extract_shortcode(path: str | None) -> str:
    """Strip the single leading '/' from the request path

    Example:
        >>> extract_shortcode('/42')
        '42'
        >>> extract_shortcode('/')
        ''
    """
    path = path or ''
    return path[1:] if path.startswith('/') else path


@guarantee_500_response
def handler(event: ProxyEvent, dao: EntryBaseDAO, landing_page_path: Path | None = None) -> ProxyResponse:
    """Handle requests to redirect short URLs

    This handler follows this procedure to redirect URLs:
    - Step 1: Extract shortcode from request path (empty path serves the landing page)
    - Step 2: Look up the short URL in the store
    - Step 3: Redirect client to target URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: target URL destination
        404: Not found
            error: "URL not found or expired" (unknown and expired codes look the same)
        500: Internal server error

    Args:
        event (ProxyEvent):
            Proxy event payload; the shortcode is the request path.
        dao (EntryBaseDAO):
            Store holding the short URLs.
        landing_page_path (Path | None):
            Template served for the empty path. Defaults to the packaged landing page.

    Returns:
        ProxyResponse:
            Proxy response including statusCode, headers, and body.

    Example:
        >>> dao = EntryMemoryDAO()
        >>> dao.insert('https://example.com/my-page')
        '1'
        >>> response = handler({'httpMethod': 'GET', 'path': '/1'}, dao)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 1- Extract shortcode from request's path
    shortcode = extract_shortcode(event.get('path'))
    if not shortcode:
        return landing_page.handler(event, landing_page_path)
    logger.debug('Client requested short URL %s.', get_short_url(shortcode, event))

    # 2- Look up the short URL
    try:
        target_url = dao.lookup(shortcode)
    except ShortURLNotFoundError:
        logger.info(
            'Short URL not found or expired. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404(NOT_FOUND_MESSAGE)

    # 3- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 302.',
        extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=target_url)
