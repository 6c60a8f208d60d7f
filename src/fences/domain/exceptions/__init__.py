"""Domain exceptions."""

from fences.domain.exceptions.base import FencesError
from fences.domain.exceptions.configuration import ConfigurationError
from fences.domain.exceptions.provider import ProviderError
from fences.domain.exceptions.violation import StructureViolationError

__all__ = [
    "FencesError",
    "ConfigurationError",
    "ProviderError",
    "StructureViolationError",
]
