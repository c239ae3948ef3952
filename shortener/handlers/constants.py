# Structured log `event` values emitted by the request handlers
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
INVALID_REQUEST = 'INVALID_REQUEST'
EMPTY_URL = 'EMPTY_URL'
METHOD_NOT_ALLOWED = 'METHOD_NOT_ALLOWED'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
LANDING_PAGE_ERROR = 'LANDING_PAGE_ERROR'

# Client-facing error messages
INVALID_REQUEST_MESSAGE = 'Invalid request'
EMPTY_URL_MESSAGE = 'URL cannot be empty'
METHOD_NOT_ALLOWED_MESSAGE = 'Method not allowed'
NOT_FOUND_MESSAGE = 'URL not found or expired'
LANDING_PAGE_ERROR_MESSAGE = 'Could not load page'
