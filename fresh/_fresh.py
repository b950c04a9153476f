from __future__ import annotations

import logging
import math
from typing import Mapping

from fresh._headers import etags_match, has_no_cache, parse_token_list
from fresh._utils import parse_http_date

__all__ = ("is_fresh",)

logger = logging.getLogger("fresh.core")


def is_fresh(request_headers: Mapping[str, str], response_headers: Mapping[str, str]) -> bool:
    """
    Check whether the client's cached representation is still valid.

    Implements the precedence of RFC 9110 Section 13.2.2: If-None-Match is
    evaluated first and, when present, If-Modified-Since is ignored. A
    request carrying ``Cache-Control: no-cache`` is always stale, to
    support end-to-end reloads (RFC 9111 Section 5.2.1.4).

    Args:
        request_headers: Request header fields keyed by lower-case name.
        response_headers: Response header fields keyed by lower-case name.

    Returns:
        True if the server can answer with 304 Not Modified, False if the
        full response has to be sent. Invalid or missing validators give
        False, this function never raises.

    Examples:
        >>> is_fresh({"if-none-match": '"foo"'}, {"etag": '"foo"'})
        True
        >>> is_fresh({"if-none-match": '"foo"'}, {"etag": '"bar"'})
        False
    """
    modified_since = request_headers.get("if-modified-since")
    none_match = request_headers.get("if-none-match")

    if modified_since is None and none_match is None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("The request is stale because it is unconditional.")
        return False

    cache_control = request_headers.get("cache-control")
    if cache_control is not None and has_no_cache(cache_control):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "The request is stale because it contains the no-cache directive. "
                "See: https://www.rfc-editor.org/rfc/rfc9111.html#section-5.2.1.4"
            )
        return False

    if none_match:
        if none_match == "*":
            return True

        etag = response_headers.get("etag")
        if not etag:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("The request is stale because the response has no ETag.")
            return False

        if "," not in none_match:
            # Trimmed like parse_token_list trims a lone tag
            candidate = none_match.strip(" ")
            if candidate and etags_match(candidate, etag):
                return True

            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"The request is stale because the ETag {etag} does not match {none_match}.")
            return False

        if etags_match(none_match, etag):
            return True

        for match in parse_token_list(none_match):
            if etags_match(match, etag):
                return True

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"The request is stale because the ETag {etag} does not match {none_match}.")
        return False

    if modified_since:
        last_modified = response_headers.get("last-modified")
        if not last_modified:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("The request is stale because the response has no Last-Modified.")
            return False

        last_modified_time = parse_http_date(last_modified)
        modified_since_time = parse_http_date(modified_since)

        if math.isnan(last_modified_time) or math.isnan(modified_since_time):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("The request is stale because a date could not be parsed.")
            return False

        if last_modified_time > modified_since_time:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    f"The request is stale because the resource was modified at {last_modified}, "
                    f"after {modified_since}."
                )
            return False

    return True
