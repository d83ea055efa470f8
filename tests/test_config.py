"""
Config System (config.py)

Tests RouteOptions and its loaders.
"""

import pytest

from waypoint.config import RouteOptions, get_default_constraint_map
from waypoint.constraints import (
    AlphaRouteConstraint,
    DefaultInlineConstraintResolver,
    IntRouteConstraint,
    RangeRouteConstraint,
)
from waypoint.faults import ConstraintConfigFault


LETTERS_PATH = "waypoint.constraints.leaf:AlphaRouteConstraint"


# ============================================================================
# RouteOptions
# ============================================================================

class TestRouteOptions:

    def test_default_map(self):
        options = RouteOptions()
        assert options.get_constraint_type("int") is IntRouteConstraint
        assert options.get_constraint_type("range") is RangeRouteConstraint
        assert set(options.constraint_map) == set(get_default_constraint_map())

    def test_default_map_is_copied(self):
        first = RouteOptions()
        first.remove_constraint("int")
        assert RouteOptions().get_constraint_type("int") is IntRouteConstraint

    def test_names_are_case_insensitive(self):
        options = RouteOptions().add_constraint("Letters", AlphaRouteConstraint)
        assert options.get_constraint_type("LETTERS") is AlphaRouteConstraint
        assert "letters" in options.constraint_map

    def test_add_by_path(self):
        options = RouteOptions().add_constraint("letters", LETTERS_PATH)
        assert options.get_constraint_type("letters") is AlphaRouteConstraint

    def test_add_by_dotted_path(self):
        options = RouteOptions().add_constraint(
            "letters", "waypoint.constraints.leaf.AlphaRouteConstraint"
        )
        assert options.get_constraint_type("letters") is AlphaRouteConstraint

    @pytest.mark.parametrize("target", [
        "no_such_module_xyz:Thing",
        "waypoint.constraints.leaf:Missing",
        "nopath",
        str,
        42,
    ])
    def test_invalid_entries_raise(self, target):
        with pytest.raises(ConstraintConfigFault):
            RouteOptions().add_constraint("bad", target)

    def test_remove_unknown_is_ignored(self):
        options = RouteOptions()
        options.remove_constraint("nope")
        assert options.get_constraint_type("nope") is None


# ============================================================================
# Loaders
# ============================================================================

class TestLoaders:

    def test_from_mapping_extends_defaults(self):
        options = RouteOptions.from_mapping({"constraints": {"letters": LETTERS_PATH}})
        assert options.get_constraint_type("letters") is AlphaRouteConstraint
        assert options.get_constraint_type("int") is IntRouteConstraint

    def test_from_mapping_replace_defaults(self):
        options = RouteOptions.from_mapping({
            "routing": {
                "replace_defaults": True,
                "constraints": {"letters": LETTERS_PATH},
            }
        })
        assert list(options.constraint_map) == ["letters"]

    def test_from_mapping_rejects_non_mapping(self):
        with pytest.raises(ConstraintConfigFault):
            RouteOptions.from_mapping({"constraints": ["letters"]})

    def test_from_mapping_empty(self):
        assert RouteOptions.from_mapping(None).constraint_map == RouteOptions().constraint_map

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "routing.yaml"
        path.write_text(
            "routing:\n"
            "  constraints:\n"
            f"    letters: \"{LETTERS_PATH}\"\n"
        )

        options = RouteOptions.from_yaml(path)

        assert options.get_constraint_type("letters") is AlphaRouteConstraint

    def test_from_yaml_rejects_scalar_document(self, tmp_path):
        path = tmp_path / "routing.yaml"
        path.write_text("just a string\n")

        with pytest.raises(ConstraintConfigFault):
            RouteOptions.from_yaml(path)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("WAYPOINT_CONSTRAINTS__LETTERS", LETTERS_PATH)

        options = RouteOptions.from_env()

        assert options.get_constraint_type("letters") is AlphaRouteConstraint

    def test_from_env_file_is_overridden_by_environment(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text(
            f"WAYPOINT_CONSTRAINTS__LETTERS={LETTERS_PATH}\n"
            "WAYPOINT_CONSTRAINTS__NUMBER=waypoint.constraints.leaf:IntRouteConstraint\n"
        )
        monkeypatch.setenv(
            "WAYPOINT_CONSTRAINTS__NUMBER", "waypoint.constraints.leaf:RangeRouteConstraint"
        )

        options = RouteOptions.from_env(env_file=env_file)

        assert options.get_constraint_type("letters") is AlphaRouteConstraint
        assert options.get_constraint_type("number") is RangeRouteConstraint

    def test_from_env_extends_base(self, monkeypatch):
        monkeypatch.setenv("APP_CONSTRAINTS__LETTERS", LETTERS_PATH)
        base = RouteOptions.from_mapping({"replace_defaults": True})

        options = RouteOptions.from_env(prefix="APP_", base=base)

        assert options is base
        assert list(options.constraint_map) == ["letters"]

    def test_resolver_uses_loaded_options(self):
        options = RouteOptions.from_mapping({"constraints": {"letters": LETTERS_PATH}})
        resolver = DefaultInlineConstraintResolver(options)
        assert isinstance(resolver.resolve_constraint("letters"), AlphaRouteConstraint)
