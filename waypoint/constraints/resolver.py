"""
Inline constraint resolution.

Turns inline tokens such as ``int``, ``minlength(3)`` or
``regex(^[a-z]{2}$)`` into constraint instances using the constraint
map held by ``RouteOptions``.
"""

import inspect
import logging
import typing
from typing import Any, List, Optional, Protocol, Tuple, TYPE_CHECKING, runtime_checkable

from ..faults import ConstraintArgumentFault, ConstraintNotResolvedFault
from .base import RouteConstraint, parse_integer

if TYPE_CHECKING:
    from ..config import RouteOptions

logger = logging.getLogger("waypoint.constraints.resolver")


@runtime_checkable
class InlineConstraintResolver(Protocol):
    """Resolves inline constraint tokens; returns None for unknown tokens."""

    def resolve_constraint(self, inline_constraint: str) -> Optional[RouteConstraint]:
        ...


def parse_inline_constraint(inline_constraint: str) -> Tuple[str, Optional[str]]:
    """
    Split a token into its name and raw argument text.

    ``"range(1,10)"`` -> ``("range", "1,10")``; ``"int"`` -> ``("int", None)``.
    Only the first ``(`` and a trailing ``)`` delimit the argument, so
    parentheses inside regex arguments are preserved.
    """
    index = inline_constraint.find("(")
    if index >= 0 and inline_constraint.endswith(")"):
        return inline_constraint[:index], inline_constraint[index + 1:-1]
    return inline_constraint, None


class DefaultInlineConstraintResolver:
    """
    Resolver backed by the ``RouteOptions`` constraint map.

    Arguments are converted to the annotated constructor parameter types
    (``int``, ``float``, ``bool``; anything else is passed as ``str``).
    Constructors taking at most one argument receive the argument text
    unsplit, so ``regex(a{1,3})`` keeps its comma.
    """

    def __init__(self, options: Optional["RouteOptions"] = None):
        if options is None:
            from ..config import RouteOptions
            options = RouteOptions()
        self.options = options

    def resolve_constraint(self, inline_constraint: str) -> Optional[RouteConstraint]:
        if inline_constraint is None:
            raise TypeError("inline_constraint must not be None")

        name, argument = parse_inline_constraint(inline_constraint)
        constraint_type = self.options.get_constraint_type(name)
        if constraint_type is None:
            logger.debug("No constraint registered for inline token %r", inline_constraint)
            return None

        constraint = self._create_constraint(constraint_type, inline_constraint, argument)
        logger.debug("Resolved inline token %r to %r", inline_constraint, constraint)
        return constraint

    def resolve(self, inline_constraint: str, route_key: str = "", template: str = "") -> RouteConstraint:
        """Like ``resolve_constraint`` but raises for unknown tokens."""
        constraint = self.resolve_constraint(inline_constraint)
        if constraint is None:
            raise ConstraintNotResolvedFault(
                route_key, inline_constraint, template, type(self).__name__,
            )
        return constraint

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _create_constraint(self, constraint_type: type, token: str, argument: Optional[str]) -> RouteConstraint:
        try:
            signature = inspect.signature(constraint_type)
        except (TypeError, ValueError):
            signature = inspect.Signature()
        parameters = [
            p for p in signature.parameters.values()
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        ]
        required = sum(1 for p in parameters if p.default is p.empty)

        if argument is None:
            raw_args: List[str] = []
        elif len(parameters) <= 1:
            raw_args = [argument]
        else:
            raw_args = [piece.strip() for piece in argument.split(",")]

        if not required <= len(raw_args) <= len(parameters):
            raise ConstraintArgumentFault(
                f"Could not find a constructor for constraint type '{constraint_type.__name__}' "
                f"with the following number of parameters: {len(raw_args)}.",
                arguments={"token": token, "count": len(raw_args)},
            )

        hints = _get_init_hints(constraint_type)
        args = [
            _convert_argument(text, hints.get(param.name, str), token, param.name)
            for text, param in zip(raw_args, parameters)
        ]
        return constraint_type(*args)


def _get_init_hints(constraint_type: type) -> dict:
    try:
        return typing.get_type_hints(constraint_type.__init__)
    except (NameError, TypeError):
        return {}


def _convert_argument(text: str, annotation: Any, token: str, param_name: str) -> Any:
    """Convert inline argument text to the constructor parameter type."""
    if typing.get_origin(annotation) is typing.Union:
        candidates = [a for a in typing.get_args(annotation) if a is not type(None)]
        annotation = candidates[0] if len(candidates) == 1 else str

    if annotation is bool:
        lowered = text.strip().lower()
        if lowered in ("true", "false"):
            return lowered == "true"
    elif annotation is int:
        number = parse_integer(text.strip())
        if number is not None:
            return number
    elif annotation is float:
        try:
            return float(text)
        except ValueError:
            pass
    else:
        return text

    raise ConstraintArgumentFault(
        f"Could not convert argument '{text}' of inline constraint '{token}' "
        f"to {annotation.__name__} for parameter '{param_name}'.",
        arguments={"token": token, "parameter": param_name, "value": text},
    )
