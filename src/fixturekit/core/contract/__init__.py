"""Contract functionality: declared return types, state modes, and checks."""

from fixturekit.core.contract.core import (
    check_constructed,
    resolve_step,
    validate_constructor,
    validate_state_function,
)
from fixturekit.core.contract.models import ReturnType, StateDefinition, StateMode

__all__ = [
    # Models
    "ReturnType",
    "StateDefinition",
    "StateMode",
    # Core
    "validate_constructor",
    "validate_state_function",
    "check_constructed",
    "resolve_step",
]
