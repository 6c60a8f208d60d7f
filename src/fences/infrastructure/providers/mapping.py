"""In-memory module graph provider."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING

from pydantic import StrictStr, TypeAdapter, ValidationError

from fences.domain.exceptions.configuration import ConfigurationError
from fences.infrastructure.config.schema import describe_validation_error

if TYPE_CHECKING:
    from pathlib import Path

_IMPORT_GRAPH = TypeAdapter(dict[str, list[StrictStr]])


class MappingProvider:
    """Provider over a precomputed identity → imports mapping.

    Keys are the known files and the roots, in mapping order. Imported
    identities that are not keys are unresolved specifiers.
    """

    def __init__(self, imports: Mapping[str, Sequence[str]]) -> None:
        if imports is None:
            raise TypeError("imports must not be None")
        for identity, targets in imports.items():
            if isinstance(targets, str):
                raise TypeError(f"imports of '{identity}' must be a sequence, not a string")
        self._imports = MappingProxyType({k: tuple(v) for k, v in imports.items()})

    def roots(self) -> Sequence[str]:
        return tuple(self._imports)

    def imports_of(self, identity: str) -> Sequence[str]:
        return self._imports.get(identity, ())

    def is_resolved(self, identity: str) -> bool:
        return identity in self._imports

    @classmethod
    def from_json(cls, path: Path) -> MappingProvider:
        """Load an edge list saved as ``{"file": ["imported", ...]}``.

        Raises:
            ConfigurationError: If the file is missing or malformed
        """
        source = str(path)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ConfigurationError(source, "file not found") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(source, f"cannot read import graph: {e}") from e

        try:
            return cls(_IMPORT_GRAPH.validate_json(content))
        except ValidationError as e:
            raise ConfigurationError(source, describe_validation_error(e, "import graph")) from e
