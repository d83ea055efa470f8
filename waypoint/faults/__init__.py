"""
Waypoint faults - Structured fault handling for route constraints.

Faults are typed exceptions carrying a stable code, a domain, a severity
and metadata describing where the failure came from. Every constraint
fault is raised while a route is being compiled; matching never faults.

Core exports:
- Fault: Base fault class
- FaultDomain: Domain enumeration
- Severity: Severity levels
"""

from .core import (
    Fault,
    FaultDomain,
    Severity,
    DOMAIN_DEFAULTS,
)

from .domains import (
    ConfigFault,
    ConstraintConfigFault,
    ConstraintFault,
    InvalidConstraintTypeFault,
    ConstraintNotResolvedFault,
    ConstraintArgumentFault,
)

__all__ = [
    # Core types
    "Fault",
    "FaultDomain",
    "Severity",
    "DOMAIN_DEFAULTS",

    # Config
    "ConfigFault",
    "ConstraintConfigFault",

    # Constraints
    "ConstraintFault",
    "InvalidConstraintTypeFault",
    "ConstraintNotResolvedFault",
    "ConstraintArgumentFault",
]
