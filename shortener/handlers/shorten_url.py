import json
import logging

from shortener.dao.base import EntryBaseDAO
from shortener.types import ProxyEvent, ProxyResponse
from shortener.utils import get_short_url, guarantee_500_response
from shortener.utils.constants import EXPIRES_IN
from shortener.handlers.responses import response_200, response_400, response_405
from shortener.handlers.constants import (
    SHORTEN_SUCCESS,
    INVALID_REQUEST,
    EMPTY_URL,
    METHOD_NOT_ALLOWED,
    INVALID_REQUEST_MESSAGE,
    EMPTY_URL_MESSAGE,
    METHOD_NOT_ALLOWED_MESSAGE,
)


logger = logging.getLogger(__name__)


class InvalidRequestError(ValueError):
    """Raised when the shorten request body can't be decoded."""

    pass


def parse_target_url(body: str | None) -> str:
    """Extract the `url` field from a shorten request body

    A missing or null `url` decodes as an empty string so that it is
    rejected as empty rather than as malformed.

    Args:
        body (str | None):
            Raw request body.

    Returns:
        str: the URL with surrounding whitespace removed (may be empty).

    Raises:
        InvalidRequestError:
            If the body is not a JSON object or `url` is not a string.
    """
    try:
        payload = json.loads(body or '')
    except json.JSONDecodeError as e:
        raise InvalidRequestError('Request body is not valid JSON.') from e

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise InvalidRequestError(f'Request body must be a JSON object (given type: {type(payload).__name__}).')

    url = payload.get('url')
    if url is None:
        url = ''
    if not isinstance(url, str):
        raise InvalidRequestError(f"'url' must be a string (given type: {type(url).__name__}).")

    return url.strip()


@guarantee_500_response
def handler(event: ProxyEvent, dao: EntryBaseDAO) -> ProxyResponse:
    """Handle requests to shorten URLs

    This handler follows this procedure to shorten URLs:
    - Step 1: Reject anything but POST
    - Step 2: Extract and trim the original URL from the request body
    - Step 3: Store the URL (the store issues the short code)
    - Step 4: Respond with the short code

    HTTP responses:
        200: Successful URL shortening
            short_code: newly issued short code
            expires_in: "24 hours"
        400: Bad client request
            error: "Invalid request" (malformed body) or "URL cannot be empty"
        405: Method not allowed
            error: "Method not allowed"
        500: Internal server error

    Args:
        event (ProxyEvent):
            Proxy event payload (httpMethod, path, headers, body).
        dao (EntryBaseDAO):
            Store receiving the new entry.

    Returns:
        ProxyResponse:
            Proxy response including status code, headers and body.

    Example:
        >>> event = {'httpMethod': 'POST', 'body': '{"url": "https://example.com"}'}
        >>> response = handler(event, EntryMemoryDAO())
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])
        {'short_code': '1', 'expires_in': '24 hours'}
    """
    # 1- Only POST creates short URLs
    method = (event.get('httpMethod') or '').upper()
    if method != 'POST':
        logger.info(
            'Shorten endpoint called with %s. Responding with 405.',
            method or 'no method',
            extra={'event': METHOD_NOT_ALLOWED},
        )
        return response_405(METHOD_NOT_ALLOWED_MESSAGE, allow='POST')

    # 2- Extract original URL from request body
    try:
        target_url = parse_target_url(event.get('body'))
    except InvalidRequestError as error:
        logger.info(
            'Invalid shorten request. Responding with 400.',
            extra={'event': INVALID_REQUEST, 'reason': str(error)},
        )
        return response_400(INVALID_REQUEST_MESSAGE)

    if not target_url:
        logger.info('Empty URL in shorten request. Responding with 400.', extra={'event': EMPTY_URL})
        return response_400(EMPTY_URL_MESSAGE)

    # 3- Store the mapping
    shortcode = dao.insert(target_url)

    # 4- Return successful response
    logger.info(
        'Shortened URL to %s. Responding with 200.',
        get_short_url(shortcode, event),
        extra={'event': SHORTEN_SUCCESS, 'shortcode': shortcode},
    )
    return response_200({'short_code': shortcode, 'expires_in': EXPIRES_IN})
