"""Module graph provider protocol.

Module resolution is ecosystem-specific and lives outside the core.
The core only needs one narrow capability: given a file, list what it imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence


class ModuleGraphProvider(Protocol):
    """Contract for module graph providers.

    Example:
        class StaticProvider:
            def roots(self) -> Sequence[str]:
                return ("app/b",)

            def imports_of(self, identity: str) -> Sequence[str]:
                return ("domain/a",) if identity == "app/b" else ()

            def is_resolved(self, identity: str) -> bool:
                return identity in ("app/b", "domain/a")
    """

    def roots(self) -> Sequence[str]:
        """Identities the collection starts from, in order."""
        ...

    def imports_of(self, identity: str) -> Sequence[str]:
        """Ordered identities imported by a file.

        Resolved imports are file identities; imports that cannot be resolved
        are returned as their literal specifier.
        """
        ...

    def is_resolved(self, identity: str) -> bool:
        """True if identity denotes a file known to the provider."""
        ...
