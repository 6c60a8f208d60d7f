"""Structure validators for classified module graphs.

- ComplianceValidator: layer allow-lists and export visibility
- CycleValidator: import cycles
"""

from fences.application.validators._base import BaseValidator
from fences.application.validators._registry import (
    default_validators,
    validators_from_config,
)
from fences.application.validators.compliance_validator import ComplianceValidator
from fences.application.validators.cycle_validator import CycleValidator

__all__ = [
    # Base
    "BaseValidator",
    # Validators
    "ComplianceValidator",
    "CycleValidator",
    # Factory functions
    "default_validators",
    "validators_from_config",
]
