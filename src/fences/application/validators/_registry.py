"""Validator registry for structure validators.

Central registry of all validators with factory functions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fences.application.validators._base import BaseValidator
from fences.application.validators.compliance_validator import ComplianceValidator
from fences.application.validators.cycle_validator import CycleValidator
from fences.domain.ports.validator import ValidatorProtocol

if TYPE_CHECKING:
    from pathlib import PurePath

    from fences.domain.model.configuration import StructureConfig


# Registry - tuple for immutability
# Order matters: validators are run in this order
_ALL_VALIDATORS: tuple[type[BaseValidator], ...] = (
    ComplianceValidator,  # Always enabled
    CycleValidator,  # Unless config.ignore_cycles
)


def default_validators(display_root: PurePath | None = None) -> tuple[ValidatorProtocol, ...]:
    """Instantiate every validator regardless of config.

    Returns:
        Tuple of validators in run order
    """
    return tuple(validator_cls(display_root) for validator_cls in _ALL_VALIDATORS)


def validators_from_config(
    config: StructureConfig,
    display_root: PurePath | None = None,
) -> tuple[ValidatorProtocol, ...]:
    """Instantiate validators based on config.

    Validators are created using their from_config() factory method.
    If from_config() returns None, the validator is disabled.

    Args:
        config: Structure configuration
        display_root: Absolute identities are rendered relative to it

    Returns:
        Tuple of enabled validators
    """
    validators: list[ValidatorProtocol] = []

    for validator_cls in _ALL_VALIDATORS:
        validator = validator_cls.from_config(config, display_root)
        if validator is not None:
            validators.append(validator)

    return tuple(validators)
