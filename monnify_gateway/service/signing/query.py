"""
Query string encoding for gateway endpoints.

Gateway search endpoints take sparse filters; unset filters must be left
out of the URL entirely rather than sent as empty parameters.
"""

from typing import Any, Mapping

import httpx

from monnify_gateway.domain.entities import is_present


def compact_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Drop absent entries from a parameter mapping, keeping input order.

    Args:
        params: Parameter name to value; may be None

    Returns:
        A new dict holding only present, non-empty values
    """
    if not params:
        return {}
    return {key: value for key, value in params.items() if is_present(value)}


def encode_query(params: Mapping[str, Any] | None) -> str:
    """
    Build a URL-encoded query string from sparse parameters.

    None, empty strings and empty containers are omitted; 0 is kept and
    booleans encode as "true"/"false". Key order follows the input.

    Example:
        >>> encode_query({"a": 1, "b": "", "c": None})
        'a=1'
    """
    compact = compact_params(params)
    if not compact:
        return ""
    return str(httpx.QueryParams(compact))
