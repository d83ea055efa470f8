"""
Route options - the configuration consumed by the inline constraint
resolver.

Options hold the constraint map: the table from inline token names
(``int``, ``range``, ...) to constraint classes. The map can be extended
in code, from a mapping, from a YAML file, or from environment variables
with merge precedence:

    defaults < file/mapping < .env file < environment variables
"""

import importlib
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Type, Union

from .constraints.leaf import (
    AlphaRouteConstraint,
    BoolRouteConstraint,
    DateTimeRouteConstraint,
    FloatRouteConstraint,
    GuidRouteConstraint,
    IntRouteConstraint,
    LengthRouteConstraint,
    LongRouteConstraint,
    MaxLengthRouteConstraint,
    MaxRouteConstraint,
    MinLengthRouteConstraint,
    MinRouteConstraint,
    RangeRouteConstraint,
    RegexRouteConstraint,
)
from .faults import ConstraintConfigFault

logger = logging.getLogger("waypoint.config")


def get_default_constraint_map() -> Dict[str, type]:
    """Return a fresh copy of the built-in constraint map."""
    return {
        # Type-specific constraints
        "int": IntRouteConstraint,
        "long": LongRouteConstraint,
        "float": FloatRouteConstraint,
        "bool": BoolRouteConstraint,
        "datetime": DateTimeRouteConstraint,
        "guid": GuidRouteConstraint,

        # Length constraints
        "minlength": MinLengthRouteConstraint,
        "maxlength": MaxLengthRouteConstraint,
        "length": LengthRouteConstraint,

        # Min/Max value constraints
        "min": MinRouteConstraint,
        "max": MaxRouteConstraint,
        "range": RangeRouteConstraint,

        # Regex-based constraints
        "alpha": AlphaRouteConstraint,
        "regex": RegexRouteConstraint,
    }


def _import_constraint(name: str, target: Union[str, type]) -> type:
    """Import ``module:Class`` (or ``module.Class``) and validate it."""
    if isinstance(target, str):
        if ":" in target:
            module_path, _, attr = target.partition(":")
        else:
            module_path, _, attr = target.rpartition(".")
        if not module_path or not attr:
            raise ConstraintConfigFault(name, f"'{target}' is not an importable class path")
        try:
            module = importlib.import_module(module_path)
        except ImportError as exc:
            raise ConstraintConfigFault(name, f"cannot import module '{module_path}': {exc}") from exc
        try:
            target = getattr(module, attr)
        except AttributeError as exc:
            raise ConstraintConfigFault(name, f"module '{module_path}' has no attribute '{attr}'") from exc

    if not isinstance(target, type) or not callable(getattr(target, "match", None)):
        raise ConstraintConfigFault(name, f"{target!r} is not a route constraint class")
    return target


@dataclass
class RouteOptions:
    """
    Routing options.

    Attributes:
        constraint_map: Inline token name (lower-case) -> constraint class
    """
    constraint_map: Dict[str, type] = field(default_factory=get_default_constraint_map)

    def __post_init__(self):
        self.constraint_map = {
            name.lower(): _import_constraint(name, cls)
            for name, cls in self.constraint_map.items()
        }

    def add_constraint(self, name: str, constraint_type: Union[str, Type]) -> "RouteOptions":
        """Register (or replace) a constraint under ``name``."""
        key = name.lower()
        self.constraint_map[key] = _import_constraint(name, constraint_type)
        logger.debug("Registered route constraint %r -> %r", key, self.constraint_map[key])
        return self

    def remove_constraint(self, name: str) -> None:
        """Unregister ``name``; unknown names are ignored."""
        self.constraint_map.pop(name.lower(), None)

    def get_constraint_type(self, name: str) -> Optional[type]:
        return self.constraint_map.get(name.lower())

    # ------------------------------------------------------------------
    # Loaders
    # ------------------------------------------------------------------

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "RouteOptions":
        """
        Build options from a plain mapping::

            {
                "replace_defaults": False,
                "constraints": {"slug": "myapp.constraints:SlugConstraint"},
            }

        A top-level ``routing`` key is unwrapped if present.
        """
        data = dict(data or {})
        if isinstance(data.get("routing"), Mapping):
            data = dict(data["routing"])

        constraints = data.get("constraints") or {}
        if not isinstance(constraints, Mapping):
            raise ConstraintConfigFault("constraints", "expected a mapping of name to class path")

        options = cls(constraint_map={}) if data.get("replace_defaults") else cls()
        for name, target in constraints.items():
            options.add_constraint(str(name), target)
        return options

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "RouteOptions":
        """Load options from a YAML file with the ``from_mapping`` shape."""
        import yaml

        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, Mapping):
            raise ConstraintConfigFault(str(path), "YAML document must be a mapping")
        return cls.from_mapping(data)

    @classmethod
    def from_env(
        cls,
        prefix: str = "WAYPOINT_",
        env_file: Optional[Union[str, Path]] = None,
        base: Optional["RouteOptions"] = None,
    ) -> "RouteOptions":
        """
        Extend options from environment variables.

        ``WAYPOINT_CONSTRAINTS__SLUG=myapp.constraints:SlugConstraint``
        registers ``slug``. Values from ``env_file`` are read with
        python-dotenv and overridden by the process environment.
        """
        from dotenv import dotenv_values

        options = base if base is not None else cls()
        env: Dict[str, Optional[str]] = {}
        if env_file is not None and Path(env_file).exists():
            env.update(dotenv_values(env_file))
        env.update(os.environ)

        marker = f"{prefix}CONSTRAINTS__"
        for key, value in env.items():
            if not key.startswith(marker) or not value:
                continue
            options.add_constraint(key[len(marker):], value)
        return options
