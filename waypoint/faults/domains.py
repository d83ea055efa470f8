"""
Waypoint faults - Domain-specific fault types.

Provides concrete fault classes for:
- CONFIG faults (route options)
- CONSTRAINTS faults (declaration, resolution and argument errors)

Concrete constraint faults also derive from the builtin exception that
describes them, so ``except TypeError`` keeps working for callers that do
not know about faults.
"""

from typing import Any, Optional
from .core import Fault, FaultDomain, Severity


# ============================================================================
# CONFIG Faults
# ============================================================================

class ConfigFault(Fault):
    """Base class for configuration faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.FATAL,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.CONFIG,
            severity=severity,
            retryable=False,
            public=False,
            metadata=metadata,
        )


class ConstraintConfigFault(ConfigFault):
    """A constraint map entry could not be loaded."""

    def __init__(self, name: str, reason: str, **kwargs):
        super().__init__(
            code="CONSTRAINT_CONFIG_INVALID",
            message=f"Constraint map entry '{name}' is invalid: {reason}",
            metadata={"name": name, "reason": reason, **kwargs.get("metadata", {})},
        )


# ============================================================================
# CONSTRAINTS Faults
# ============================================================================

class ConstraintFault(Fault):
    """Base class for route constraint faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.FATAL,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.CONSTRAINTS,
            severity=severity,
            retryable=False,
            public=False,
            metadata=metadata,
        )


class InvalidConstraintTypeFault(ConstraintFault, TypeError):
    """A declared constraint is neither a string nor a route constraint."""

    def __init__(self, route_key: str, value: Any, template: str):
        super().__init__(
            code="CONSTRAINT_INVALID_TYPE",
            message=(
                f"The constraint entry '{route_key}' - '{value}' on the route "
                f"'{template}' must have a string value or be of a type which "
                f"implements 'RouteConstraint'."
            ),
            metadata={
                "route_key": route_key,
                "value": repr(value),
                "value_type": type(value).__name__,
                "template": template,
            },
        )
        self.route_key = route_key
        self.value = value
        self.template = template


class ConstraintNotResolvedFault(ConstraintFault, LookupError):
    """An inline constraint token has no registered constraint."""

    def __init__(self, route_key: str, token: str, template: str, resolver: str):
        super().__init__(
            code="CONSTRAINT_NOT_RESOLVED",
            message=(
                f"The constraint entry '{route_key}' - '{token}' on the route "
                f"'{template}' could not be resolved by the constraint resolver "
                f"of type '{resolver}'."
            ),
            metadata={
                "route_key": route_key,
                "token": token,
                "template": template,
                "resolver": resolver,
            },
        )
        self.route_key = route_key
        self.token = token
        self.template = template
        self.resolver = resolver


class ConstraintArgumentFault(ConstraintFault, ValueError):
    """A constraint was constructed with invalid arguments."""

    def __init__(self, message: str, *, arguments: Optional[dict[str, Any]] = None, **kwargs):
        super().__init__(
            code="CONSTRAINT_ARGUMENT_INVALID",
            message=message,
            metadata={"arguments": arguments or {}, **kwargs.get("metadata", {})},
        )
        self.arguments = arguments or {}
