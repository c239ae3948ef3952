import logging
from pathlib import Path

from shortener.types import ProxyEvent, ProxyResponse
from shortener.utils import landing_page_path, guarantee_500_response
from shortener.handlers.responses import response_html, response_500
from shortener.handlers.constants import LANDING_PAGE_ERROR, LANDING_PAGE_ERROR_MESSAGE


logger = logging.getLogger(__name__)


@guarantee_500_response
def handler(event: ProxyEvent, path: Path | None = None) -> ProxyResponse:
    """Serve the landing page

    HTTP responses:
        200: landing page HTML
        500: the template is missing or unreadable

    Args:
        event (ProxyEvent):
            Proxy event payload.
        path (Path | None):
            Template location. Defaults to landing_page_path().

    Returns:
        ProxyResponse:
            Proxy response with the page as `text/html`.
    """
    path = path if path is not None else landing_page_path()

    try:
        content = path.read_text(encoding='utf-8')
    except OSError:
        logger.exception(
            'Failed to read landing page template. Responding with 500.',
            extra={'event': LANDING_PAGE_ERROR, 'path': str(path)},
        )
        return response_500(LANDING_PAGE_ERROR_MESSAGE)

    return response_html(content)
