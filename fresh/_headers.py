from __future__ import annotations

import re
from typing import (
    Any,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from fresh._utils import HEADERS_ENCODING

__all__ = (
    "NO_CACHE_PATTERN",
    "Headers",
    "etags_match",
    "has_no_cache",
    "parse_token_list",
)

# RFC 9111 Section 5.2.1.4, matched the way browsers send it on reload.
NO_CACHE_PATTERN = re.compile(r"(?:^|,)\s*?no-cache\s*?(?:,|\Z)")

WEAK_PREFIX = "W/"


def has_no_cache(cache_control: str) -> bool:
    """Check whether a Cache-Control value carries the ``no-cache`` directive."""
    return NO_CACHE_PATTERN.search(cache_control) is not None


def etags_match(etag: str, other: str) -> bool:
    """
    Compare two entity-tags using the weak comparison function.

    Per RFC 9110 Section 8.8.3.2, the weak comparison ignores the ``W/``
    indicator, so ``"xyzzy"`` and ``W/"xyzzy"`` match.

    Examples:
        >>> etags_match('"xyzzy"', 'W/"xyzzy"')
        True
        >>> etags_match('W/"xyzzy"', 'W/"xyzzy"')
        True
        >>> etags_match('"xyzzy"', '"zyzzy"')
        False
    """
    return etag == other or etag == WEAK_PREFIX + other or WEAK_PREFIX + etag == other


def parse_token_list(value: str) -> List[str]:
    """
    Split a comma-separated header value into its tokens.

    Spaces around each token are removed and empty tokens are dropped,
    so ``'"a", , "b"'`` gives ``['"a"', '"b"']``.

    Args:
        value: The raw header value, e.g. an If-None-Match list.

    Returns:
        The tokens in their original order.

    Examples:
        >>> parse_token_list('"foo", "bar",  "fizz"')
        ['"foo"', '"bar"', '"fizz"']
        >>> parse_token_list("a,,b")
        ['a', 'b']
        >>> parse_token_list("")
        []
    """
    tokens: List[str] = []
    start = end = 0

    for i, char in enumerate(value):
        if char == " ":
            if start == end:
                start = end = i + 1
        elif char == ",":
            if end > start:
                tokens.append(value[start:end])
            start = end = i + 1
        else:
            end = i + 1

    if end > start:
        tokens.append(value[start:end])

    return tokens


class Headers(Mapping[str, str]):
    """
    Read-only, case-insensitive view over HTTP header fields.

    Field names are stored lower-cased. A field sent several times reads
    as its values joined with ``", "``, which is how list-based fields
    such as If-None-Match are combined. A field with an empty value is
    still present.

    Example:
        ```python
        headers = Headers({"ETag": '"foo"', "If-None-Match": ['"a"', '"b"']})
        headers["etag"]           # '"foo"'
        headers["if-none-match"]  # '"a", "b"'
        ```
    """

    def __init__(self, headers: Mapping[str, Union[str, List[str]]]) -> None:
        self._headers: dict[str, List[str]] = {}
        for key, value in headers.items():
            self._headers.setdefault(key.lower(), []).extend([value] if isinstance(value, str) else value)

    @classmethod
    def from_raw(cls, raw_headers: Iterable[Tuple[bytes, bytes]]) -> "Headers":
        """Build headers from raw ``(name, value)`` byte pairs, as found in an ASGI scope."""
        headers: dict[str, List[str]] = {}
        for key, value in raw_headers:
            headers.setdefault(key.decode(HEADERS_ENCODING).lower(), []).append(value.decode(HEADERS_ENCODING))
        return cls(headers)

    def get_list(self, key: str) -> Optional[List[str]]:
        values = self._headers.get(key.lower())
        return None if values is None else values[:]

    def __getitem__(self, key: str) -> str:
        return ", ".join(self._headers[key.lower()])

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._headers

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._headers!r})"

    def __eq__(self, other_headers: Any) -> bool:
        return isinstance(other_headers, Headers) and self._headers == other_headers._headers
