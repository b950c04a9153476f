from fresh._fresh import is_fresh as is_fresh
from fresh._headers import (
    Headers as Headers,
    etags_match as etags_match,
    has_no_cache as has_no_cache,
    parse_token_list as parse_token_list,
)
from fresh._utils import parse_http_date as parse_http_date

__all__ = (
    # Freshness
    "is_fresh",
    ## Parsers
    "parse_http_date",
    "parse_token_list",
    "etags_match",
    "has_no_cache",
    ## Headers
    "Headers",
)
