from typing import Any, TypeAlias


# Type aliases for proxy-integration request/response dictionaries
ProxyEvent: TypeAlias = dict[str, Any]
ProxyContext: TypeAlias = Any
ProxyResponse: TypeAlias = dict[str, Any]
