"""
Built-in leaf constraints.

Every constraint here converts the captured value with ``str()`` and never
raises from ``match``; absent or unparseable values simply do not match.
Constructor arguments are validated eagerly and raise
``ConstraintArgumentFault``.
"""

import math
import re
import uuid
from datetime import date, datetime
from typing import Any, Mapping, Optional, Pattern, Union

from ..faults import ConstraintArgumentFault
from .base import RouteDirection, get_value_string, parse_integer


INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1

_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z", re.ASCII)


# ============================================================================
# Type constraints
# ============================================================================

class IntRouteConstraint:
    """Value must be a 32-bit signed integer."""

    __slots__ = ()

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        number = parse_integer(get_value_string(values, route_key))
        return number is not None and INT32_MIN <= number <= INT32_MAX

    def __repr__(self) -> str:
        return "IntRouteConstraint()"


class LongRouteConstraint:
    """Value must be a 64-bit signed integer."""

    __slots__ = ()

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        number = parse_integer(get_value_string(values, route_key))
        return number is not None and INT64_MIN <= number <= INT64_MAX

    def __repr__(self) -> str:
        return "LongRouteConstraint()"


class FloatRouteConstraint:
    """Value must be a finite decimal number (``1``, ``-2.5``, ``3e10``)."""

    __slots__ = ()

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        text = get_value_string(values, route_key)
        if text is None or not _FLOAT_RE.match(text):
            return False
        return math.isfinite(float(text))

    def __repr__(self) -> str:
        return "FloatRouteConstraint()"


class BoolRouteConstraint:
    """Value must be ``true`` or ``false`` (any case)."""

    __slots__ = ()

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        text = get_value_string(values, route_key)
        return text is not None and text.lower() in ("true", "false")

    def __repr__(self) -> str:
        return "BoolRouteConstraint()"


class GuidRouteConstraint:
    """Value must be a UUID in any textual form ``uuid.UUID`` accepts."""

    __slots__ = ()

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        value = values.get(route_key)
        if value is None:
            return False
        if isinstance(value, uuid.UUID):
            return True
        try:
            uuid.UUID(str(value))
        except ValueError:
            return False
        return True

    def __repr__(self) -> str:
        return "GuidRouteConstraint()"


class DateTimeRouteConstraint:
    """Value must be an ISO-8601 date or datetime."""

    __slots__ = ()

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        value = values.get(route_key)
        if value is None:
            return False
        if isinstance(value, (date, datetime)):
            return True
        try:
            datetime.fromisoformat(str(value))
        except ValueError:
            return False
        return True

    def __repr__(self) -> str:
        return "DateTimeRouteConstraint()"


# ============================================================================
# String constraints
# ============================================================================

class RegexRouteConstraint:
    """
    Value must contain a match for a regular expression.

    String patterns are compiled case-insensitive and searched, not
    anchored; callers that need whole-value matching anchor the pattern
    themselves. A precompiled pattern is used as given.
    """

    __slots__ = ("pattern",)

    def __init__(self, regex_pattern: Union[str, Pattern]):
        if isinstance(regex_pattern, str):
            try:
                regex_pattern = re.compile(regex_pattern, re.IGNORECASE)
            except re.error as exc:
                raise ConstraintArgumentFault(
                    f"The regular expression '{regex_pattern}' is invalid: {exc}",
                    arguments={"regex_pattern": regex_pattern},
                ) from exc
        self.pattern: Pattern = regex_pattern

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        text = get_value_string(values, route_key)
        return text is not None and self.pattern.search(text) is not None

    def __repr__(self) -> str:
        return f"RegexRouteConstraint({self.pattern.pattern!r})"


class AlphaRouteConstraint:
    """Value may only contain ASCII letters."""

    __slots__ = ()

    _pattern = re.compile(r"[a-z]*\Z", re.IGNORECASE | re.ASCII)

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        text = get_value_string(values, route_key)
        return text is not None and self._pattern.match(text) is not None

    def __repr__(self) -> str:
        return "AlphaRouteConstraint()"


class MinLengthRouteConstraint:
    """Value must be at least ``min_length`` characters long."""

    __slots__ = ("min_length",)

    def __init__(self, min_length: int):
        if min_length < 0:
            raise ConstraintArgumentFault(
                "Value must be greater than or equal to 0.",
                arguments={"min_length": min_length},
            )
        self.min_length = min_length

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        text = get_value_string(values, route_key)
        return text is not None and len(text) >= self.min_length

    def __repr__(self) -> str:
        return f"MinLengthRouteConstraint({self.min_length})"


class MaxLengthRouteConstraint:
    """Value must be at most ``max_length`` characters long."""

    __slots__ = ("max_length",)

    def __init__(self, max_length: int):
        if max_length < 0:
            raise ConstraintArgumentFault(
                "Value must be greater than or equal to 0.",
                arguments={"max_length": max_length},
            )
        self.max_length = max_length

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        text = get_value_string(values, route_key)
        return text is not None and len(text) <= self.max_length

    def __repr__(self) -> str:
        return f"MaxLengthRouteConstraint({self.max_length})"


class LengthRouteConstraint:
    """
    Value length must be exactly ``min_length`` or, when ``max_length`` is
    given, lie within ``[min_length, max_length]``.
    """

    __slots__ = ("min_length", "max_length")

    def __init__(self, min_length: int, max_length: Optional[int] = None):
        if max_length is None:
            max_length = min_length
        if min_length < 0 or max_length < 0:
            raise ConstraintArgumentFault(
                "Value must be greater than or equal to 0.",
                arguments={"min_length": min_length, "max_length": max_length},
            )
        if min_length > max_length:
            raise ConstraintArgumentFault(
                "The value for argument 'min_length' should be less than or equal "
                "to the value for the argument 'max_length'.",
                arguments={"min_length": min_length, "max_length": max_length},
            )
        self.min_length = min_length
        self.max_length = max_length

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        text = get_value_string(values, route_key)
        return text is not None and self.min_length <= len(text) <= self.max_length

    def __repr__(self) -> str:
        return f"LengthRouteConstraint({self.min_length}, {self.max_length})"


# ============================================================================
# Numeric bounds
# ============================================================================

class RangeRouteConstraint:
    """Value must be an integer within ``[min, max]`` (both inclusive)."""

    __slots__ = ("min", "max")

    def __init__(self, min_value: int, max_value: int):
        if min_value > max_value:
            raise ConstraintArgumentFault(
                "The value for argument 'min' should be less than or equal to "
                "the value for the argument 'max'.",
                arguments={"min": min_value, "max": max_value},
            )
        self.min = min_value
        self.max = max_value

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        number = parse_integer(get_value_string(values, route_key))
        return number is not None and self.min <= number <= self.max

    def __repr__(self) -> str:
        return f"RangeRouteConstraint({self.min}, {self.max})"


class MinRouteConstraint:
    """Value must be an integer greater than or equal to ``min``."""

    __slots__ = ("min",)

    def __init__(self, min_value: int):
        self.min = min_value

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        number = parse_integer(get_value_string(values, route_key))
        return number is not None and number >= self.min

    def __repr__(self) -> str:
        return f"MinRouteConstraint({self.min})"


class MaxRouteConstraint:
    """Value must be an integer less than or equal to ``max``."""

    __slots__ = ("max",)

    def __init__(self, max_value: int):
        self.max = max_value

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        number = parse_integer(get_value_string(values, route_key))
        return number is not None and number <= self.max

    def __repr__(self) -> str:
        return f"MaxRouteConstraint({self.max})"
