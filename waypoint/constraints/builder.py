"""
Route constraint builder.

Collects constraint declarations for the parameters of one route template
and produces the final ``parameter -> constraint`` mapping:

- several constraints on one parameter are merged into a
  ``CompositeRouteConstraint``
- optional parameters are wrapped in ``OptionalRouteConstraint``

Optionality and declarations are tracked separately and only combined in
``build()``, so ``set_optional`` may be called before, after or between
declarations.
"""

import logging
import re
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Set

from ..faults import ConstraintNotResolvedFault, InvalidConstraintTypeFault
from .base import RouteConstraint, is_route_constraint
from .composite import CompositeRouteConstraint, OptionalRouteConstraint
from .leaf import RegexRouteConstraint
from .resolver import InlineConstraintResolver

logger = logging.getLogger("waypoint.constraints.builder")


class RouteConstraintBuilder:
    """
    Builds the constraint mapping for a single route template.

    A builder is per-compilation working state and is not thread-safe.
    The mapping returned by ``build()`` is read-only and may be shared.

    Example:
        ```python
        builder = RouteConstraintBuilder(DefaultInlineConstraintResolver(), "{controller}/{id?}")
        builder.set_optional("id")
        builder.add_resolved_constraint("id", "int")
        constraints = builder.build()
        ```
    """

    def __init__(self, inline_constraint_resolver: InlineConstraintResolver, display_name: str):
        if inline_constraint_resolver is None:
            raise TypeError("inline_constraint_resolver must not be None")
        if display_name is None:
            raise TypeError("display_name must not be None")

        self._resolver = inline_constraint_resolver
        self._display_name = display_name
        self._constraints: Dict[str, List[RouteConstraint]] = {}
        self._optional_parameters: Set[str] = set()

    @property
    def display_name(self) -> str:
        """Route template the constraints belong to (diagnostics only)."""
        return self._display_name

    def add_constraint(self, key: str, value: Any) -> None:
        """
        Add a constraint for ``key``.

        ``value`` may be:
        - a string: a regex matched against the whole value, ignoring case
        - a compiled ``re.Pattern``: used as-is
        - any route constraint instance

        Raises:
            InvalidConstraintTypeFault: for any other value
        """
        if key is None:
            raise TypeError("key must not be None")

        if isinstance(value, str):
            constraint = RegexRouteConstraint(f"^({value})\\Z")
        elif isinstance(value, re.Pattern):
            constraint = RegexRouteConstraint(value)
        elif is_route_constraint(value):
            constraint = value
        else:
            raise InvalidConstraintTypeFault(key, value, self._display_name)

        self._add(key, constraint)

    def add_resolved_constraint(self, key: str, constraint_text: str) -> None:
        """
        Resolve an inline token such as ``int`` or ``range(1,10)`` and add
        the result for ``key``.

        Raises:
            ConstraintNotResolvedFault: when the resolver does not know the token
        """
        if key is None:
            raise TypeError("key must not be None")
        if constraint_text is None:
            raise TypeError("constraint_text must not be None")

        constraint = self._resolver.resolve_constraint(constraint_text)
        if constraint is None:
            raise ConstraintNotResolvedFault(
                key,
                constraint_text,
                self._display_name,
                type(self._resolver).__name__,
            )
        self._add(key, constraint)

    def set_optional(self, key: str) -> None:
        """Mark ``key`` optional. Idempotent."""
        if key is None:
            raise TypeError("key must not be None")
        self._optional_parameters.add(key)

    def build(self) -> Mapping[str, RouteConstraint]:
        """
        Produce the read-only constraint mapping.

        Parameters without declared constraints are omitted, optional or
        not. Calling ``build()`` again returns an equivalent mapping.
        """
        constraints: Dict[str, RouteConstraint] = {}
        for key, declared in self._constraints.items():
            if len(declared) == 1:
                constraint = declared[0]
            else:
                constraint = CompositeRouteConstraint(declared)

            if key in self._optional_parameters:
                constraint = OptionalRouteConstraint(constraint)

            constraints[key] = constraint

        logger.debug(
            "Built %d route constraint(s) for '%s'",
            len(constraints),
            self._display_name,
        )
        return MappingProxyType(constraints)

    def _add(self, key: str, constraint: RouteConstraint) -> None:
        self._constraints.setdefault(key, []).append(constraint)
