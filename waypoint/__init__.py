"""
Waypoint - route constraint resolution and composition.

Compiles the constraints declared on a route template's parameters
(literal regexes, inline tokens such as ``int`` or ``range(1,100)``, and
constraint objects) into one executable constraint per parameter.
"""

from .constraints import (
    RouteConstraint,
    RouteDirection,
    CompositeRouteConstraint,
    OptionalRouteConstraint,
    RegexRouteConstraint,
    RangeRouteConstraint,
    DefaultInlineConstraintResolver,
    InlineConstraintResolver,
    RouteConstraintBuilder,
)
from .config import RouteOptions, get_default_constraint_map
from .faults import (
    Fault,
    ConstraintFault,
    InvalidConstraintTypeFault,
    ConstraintNotResolvedFault,
    ConstraintArgumentFault,
    ConstraintConfigFault,
)

__version__ = "0.1.0"

__all__ = [
    "RouteConstraint",
    "RouteDirection",
    "CompositeRouteConstraint",
    "OptionalRouteConstraint",
    "RegexRouteConstraint",
    "RangeRouteConstraint",
    "DefaultInlineConstraintResolver",
    "InlineConstraintResolver",
    "RouteConstraintBuilder",
    "RouteOptions",
    "get_default_constraint_map",
    "Fault",
    "ConstraintFault",
    "InvalidConstraintTypeFault",
    "ConstraintNotResolvedFault",
    "ConstraintArgumentFault",
    "ConstraintConfigFault",
]
