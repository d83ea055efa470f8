"""
Route constraints - predicates over captured route values, and the
builder that compiles a route's declared constraints.
"""

from .base import (
    RouteConstraint,
    RouteDirection,
    is_route_constraint,
)
from .leaf import (
    IntRouteConstraint,
    LongRouteConstraint,
    FloatRouteConstraint,
    BoolRouteConstraint,
    GuidRouteConstraint,
    DateTimeRouteConstraint,
    RegexRouteConstraint,
    AlphaRouteConstraint,
    MinLengthRouteConstraint,
    MaxLengthRouteConstraint,
    LengthRouteConstraint,
    RangeRouteConstraint,
    MinRouteConstraint,
    MaxRouteConstraint,
)
from .composite import CompositeRouteConstraint, OptionalRouteConstraint
from .resolver import (
    InlineConstraintResolver,
    DefaultInlineConstraintResolver,
    parse_inline_constraint,
)
from .builder import RouteConstraintBuilder

__all__ = [
    # Capability
    "RouteConstraint",
    "RouteDirection",
    "is_route_constraint",
    # Leaf constraints
    "IntRouteConstraint",
    "LongRouteConstraint",
    "FloatRouteConstraint",
    "BoolRouteConstraint",
    "GuidRouteConstraint",
    "DateTimeRouteConstraint",
    "RegexRouteConstraint",
    "AlphaRouteConstraint",
    "MinLengthRouteConstraint",
    "MaxLengthRouteConstraint",
    "LengthRouteConstraint",
    "RangeRouteConstraint",
    "MinRouteConstraint",
    "MaxRouteConstraint",
    # Wrappers
    "CompositeRouteConstraint",
    "OptionalRouteConstraint",
    # Resolution
    "InlineConstraintResolver",
    "DefaultInlineConstraintResolver",
    "parse_inline_constraint",
    # Builder
    "RouteConstraintBuilder",
]
