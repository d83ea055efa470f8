"""
Route constraint capability.

A route constraint is any object exposing::

    match(values, route_key, direction=RouteDirection.INCOMING_REQUEST) -> bool

Constraints are stateless after construction and safe to share between
concurrently matching requests. ``match`` never raises: an absent,
``None`` or malformed value is reported as "no match".
"""

import re
from enum import Enum
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


class RouteDirection(str, Enum):
    """Why a route is being matched."""
    INCOMING_REQUEST = "incoming_request"
    URL_GENERATION = "url_generation"


@runtime_checkable
class RouteConstraint(Protocol):
    """Predicate over one captured route value."""

    def match(
        self,
        values: Mapping[str, Any],
        route_key: str,
        direction: RouteDirection = RouteDirection.INCOMING_REQUEST,
    ) -> bool:
        ...


def is_route_constraint(obj: Any) -> bool:
    """Check whether ``obj`` implements the constraint capability.

    Classes are rejected; only instances with a callable ``match`` can be
    declared on a route.
    """
    return (
        not isinstance(obj, type)
        and isinstance(obj, RouteConstraint)
        and callable(getattr(obj, "match", None))
    )


# Invariant base-10 integer: optional ASCII whitespace around an optional
# sign and ASCII digits.
_INTEGER_RE = re.compile(r"[\t\n\v\f\r ]*([+-]?[0-9]+)[\t\n\v\f\r ]*\Z", re.ASCII)


def get_value_string(values: Mapping[str, Any], route_key: str) -> Optional[str]:
    """Return the captured value as a string, or None when absent."""
    value = values.get(route_key)
    if value is None:
        return None
    return str(value)


def parse_integer(text: Optional[str]) -> Optional[int]:
    """Parse ``text`` as a strict base-10 integer.

    Surrounding ASCII whitespace and a leading sign are allowed. Unlike
    ``int()``, digit-group underscores and non-ASCII digits are rejected.
    """
    if text is None:
        return None
    match = _INTEGER_RE.match(text)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Beyond the interpreter's int string conversion limit
        return None
