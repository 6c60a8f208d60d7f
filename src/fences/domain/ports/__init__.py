"""Ports: protocols implemented by adapters and extensions."""

from fences.domain.ports.module_graph import ModuleGraphProvider
from fences.domain.ports.reporter import ReporterProtocol
from fences.domain.ports.validator import ValidatorProtocol

__all__ = [
    "ModuleGraphProvider",
    "ReporterProtocol",
    "ValidatorProtocol",
]
