"""
Faults System (waypoint/faults)

Tests Fault, FaultDomain, Severity and the constraint fault types.
"""

import pytest

from waypoint.faults import (
    DOMAIN_DEFAULTS,
    ConfigFault,
    ConstraintArgumentFault,
    ConstraintConfigFault,
    ConstraintFault,
    ConstraintNotResolvedFault,
    Fault,
    FaultDomain,
    InvalidConstraintTypeFault,
    Severity,
)


# ============================================================================
# FaultDomain
# ============================================================================

class TestFaultDomain:

    def test_standard_domains(self):
        assert FaultDomain.CONFIG.name == "config"
        assert FaultDomain.CONSTRAINTS.name == "constraints"

    def test_domain_equality(self):
        assert FaultDomain("test") == FaultDomain("test")
        assert FaultDomain("test") != FaultDomain("other")
        assert FaultDomain.CONSTRAINTS == "constraints"

    def test_domain_hashable(self):
        assert FaultDomain("test") in {FaultDomain("test")}

    def test_domain_defaults(self):
        assert DOMAIN_DEFAULTS[FaultDomain.CONSTRAINTS]["severity"] == Severity.FATAL
        assert set(DOMAIN_DEFAULTS) == {FaultDomain.CONFIG, FaultDomain.CONSTRAINTS}


# ============================================================================
# Fault
# ============================================================================

class TestFault:

    def test_basic_fault(self):
        f = Fault(code="ROUTE_BAD", message="Bad route", domain=FaultDomain.CONSTRAINTS)
        assert f.code == "ROUTE_BAD"
        assert f.severity == Severity.FATAL
        assert f.retryable is False
        assert f.public is False
        assert str(f) == "[ROUTE_BAD] Bad route"

    def test_missing_fields_raise(self):
        with pytest.raises(TypeError):
            Fault(code="X", message="no domain")

    def test_custom_domain_defaults_to_error(self):
        f = Fault(code="X", message="m", domain=FaultDomain("custom"))
        assert f.severity == Severity.ERROR

    def test_to_dict(self):
        f = Fault(
            code="ERR",
            message="msg",
            domain=FaultDomain.CONFIG,
            metadata={"key": "value"},
        )
        assert f.to_dict() == {
            "code": "ERR",
            "message": "msg",
            "domain": "config",
            "severity": "fatal",
            "retryable": False,
            "public": False,
            "metadata": {"key": "value"},
        }


# ============================================================================
# Constraint faults
# ============================================================================

class TestConstraintFaults:

    def test_invalid_type(self):
        f = InvalidConstraintTypeFault("controller", 5, "{controller}/{action}")

        assert isinstance(f, ConstraintFault)
        assert isinstance(f, TypeError)
        assert f.domain == FaultDomain.CONSTRAINTS
        assert f.severity == Severity.FATAL
        assert "'controller' - '5'" in f.message
        assert f.metadata == {
            "route_key": "controller",
            "value": "5",
            "value_type": "int",
            "template": "{controller}/{action}",
        }

    def test_not_resolved(self):
        f = ConstraintNotResolvedFault("id", "nope", "{id}", "MyResolver")

        assert isinstance(f, LookupError)
        assert f.code == "CONSTRAINT_NOT_RESOLVED"
        assert "'MyResolver'" in f.message
        assert f.metadata["resolver"] == "MyResolver"

    def test_argument(self):
        f = ConstraintArgumentFault("bad", arguments={"min": 2, "max": 1})

        assert isinstance(f, ValueError)
        assert f.arguments == {"min": 2, "max": 1}
        assert f.metadata["arguments"] == {"min": 2, "max": 1}

    def test_config(self):
        f = ConstraintConfigFault("slug", "not importable")

        assert isinstance(f, ConfigFault)
        assert f.domain == FaultDomain.CONFIG
        assert f.message == "Constraint map entry 'slug' is invalid: not importable"
