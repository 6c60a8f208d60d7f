"""Module graph providers."""

from fences.infrastructure.providers.mapping import MappingProvider
from fences.infrastructure.providers.python_source import PythonSourceProvider

__all__ = ["MappingProvider", "PythonSourceProvider"]
