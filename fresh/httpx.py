from __future__ import annotations

from fresh._fresh import is_fresh as _is_fresh
from fresh._headers import Headers

try:
    import httpx
except ImportError as e:
    raise ImportError(
        "httpx is required to use fresh.httpx module. "
        "Please install fresh with the 'httpx' extra, "
        "e.g., 'pip install fresh[httpx]'."
    ) from e


def _httpx_to_internal(headers: httpx.Headers) -> Headers:
    return Headers({key: headers.get_list(key) for key in headers.keys()})


def is_fresh(request: httpx.Request, response: httpx.Response) -> bool:
    """
    Check freshness for an httpx request and the response it would receive.

    Repeated header fields, such as several If-None-Match lines, are
    combined into a single list value before the check.

    Example:
        ```python
        import httpx
        from fresh.httpx import is_fresh

        request = httpx.Request("GET", "https://example.com", headers={"If-None-Match": '"foo"'})
        response = httpx.Response(200, headers={"ETag": '"foo"'})
        is_fresh(request, response)  # True
        ```
    """
    return _is_fresh(_httpx_to_internal(request.headers), _httpx_to_internal(response.headers))
