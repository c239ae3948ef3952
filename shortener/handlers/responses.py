import json

from shortener.types import ProxyResponse


JSON_HEADERS = {'Content-Type': 'application/json'}


def response_json(status_code: int, body: dict, headers: dict | None = None) -> ProxyResponse:
    return {
        'statusCode': status_code,
        'headers': {**JSON_HEADERS, **(headers or {})},
        'body': json.dumps(body),
    }


def response_200(body: dict) -> ProxyResponse:
    return response_json(200, body)


def response_html(content: str) -> ProxyResponse:
    return {
        'statusCode': 200,
        'headers': {'Content-Type': 'text/html'},
        'body': content,
    }


def response_302(*, location: str) -> ProxyResponse:
    return {
        'statusCode': 302,
        'headers': {'Location': location},
        'body': '',  # no body needed for redirects
    }


def response_400(message: str) -> ProxyResponse:
    return response_json(400, {'error': message})


def response_404(message: str) -> ProxyResponse:
    return response_json(404, {'error': message})


def response_405(message: str, *, allow: str) -> ProxyResponse:
    return response_json(405, {'error': message}, headers={'Allow': allow})


def response_500(message: str | None = None) -> ProxyResponse:
    return response_json(500, {'error': message or 'Internal Server Error'})
