"""fences - layered architecture enforcement for module import graphs."""

__version__ = "0.1.0"

from fences.application.services.structure_checker import StructureChecker
from fences.domain.model.configuration import LayerConfig, StructureConfig
from fences.domain.model.diagnostic import Diagnostic, DiagnosticCode

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "LayerConfig",
    "StructureChecker",
    "StructureConfig",
    "__version__",
]
