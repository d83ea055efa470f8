"""
Shared test fixtures and helpers for the Waypoint test suite.
"""

import pytest

from waypoint.config import RouteOptions
from waypoint.constraints import DefaultInlineConstraintResolver, RouteConstraintBuilder


@pytest.fixture
def route_options():
    """Fresh options with the built-in constraint map."""
    return RouteOptions()


@pytest.fixture
def resolver(route_options):
    """Default inline resolver over ``route_options``."""
    return DefaultInlineConstraintResolver(route_options)


@pytest.fixture
def make_builder(resolver):
    """Factory for builders bound to a route template."""
    def _make(template: str = "{controller}/{action}") -> RouteConstraintBuilder:
        return RouteConstraintBuilder(resolver, template)
    return _make

