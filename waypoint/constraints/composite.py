"""
Constraint wrappers: logical AND over several constraints, and optional
parameters.
"""

from typing import Any, Iterable, Mapping, Tuple

from .base import RouteConstraint, RouteDirection


class CompositeRouteConstraint:
    """
    Matches only when every inner constraint matches.

    Inner constraints keep their declaration order, which is what
    ``repr`` shows. An empty composite matches vacuously.
    """

    __slots__ = ("constraints",)

    def __init__(self, constraints: Iterable[RouteConstraint]):
        if constraints is None:
            raise TypeError("constraints must not be None")
        self.constraints: Tuple[RouteConstraint, ...] = tuple(constraints)

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        return all(
            constraint.match(values, route_key, direction)
            for constraint in self.constraints
        )

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self.constraints)
        return f"CompositeRouteConstraint([{inner}])"


class OptionalRouteConstraint:
    """
    Matches when the value is absent or ``None``; otherwise defers to
    ``inner_constraint``.
    """

    __slots__ = ("inner_constraint",)

    def __init__(self, inner_constraint: RouteConstraint):
        if inner_constraint is None:
            raise TypeError("inner_constraint must not be None")
        self.inner_constraint = inner_constraint

    def match(self, values: Mapping[str, Any], route_key: str,
              direction: RouteDirection = RouteDirection.INCOMING_REQUEST) -> bool:
        if values.get(route_key) is None:
            return True
        return self.inner_constraint.match(values, route_key, direction)

    def __repr__(self) -> str:
        return f"OptionalRouteConstraint({self.inner_constraint!r})"
