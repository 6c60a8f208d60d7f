"""Python source module graph provider.

Parses ``.py`` files with ``ast`` and resolves their imports to files under a
source root. Imports that do not resolve to a scanned file (stdlib,
third-party, dynamic) are returned as their literal module name.
"""

from __future__ import annotations

import ast
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from fences.domain.exceptions.configuration import ConfigurationError
from fences.domain.exceptions.provider import ProviderError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

_SKIPPED_DIRS = frozenset({"__pycache__", "node_modules"})


@dataclass(frozen=True, slots=True)
class ImportStatement:
    """One imported module reference.

    Attributes:
        module: Absolute module name, or the raw relative spec if unresolvable
        names: Names of a ``from`` import (empty for plain ``import``)
        is_type_checking: Inside an ``if TYPE_CHECKING:`` block
    """

    module: str
    names: tuple[str, ...] = ()
    is_type_checking: bool = False


def module_parts(relative: Path) -> tuple[str, ...] | None:
    """Module name parts of a file path relative to a source root.

    Examples:
        app/domain/user.py → ("app", "domain", "user")
        app/__init__.py → ("app",)
        scripts/run-me.py → None (not importable)
    """
    parts = list(relative.with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts = parts[:-1]
    if not parts or not all(part.isidentifier() for part in parts):
        return None
    return tuple(parts)


def resolve_relative_import(
    module: str | None,
    level: int,
    package: tuple[str, ...],
) -> str:
    """Resolve relative import to absolute module path.

    Args:
        module: Module part of import (after dots)
        level: Number of dots (0=absolute, 1=., 2=..)
        package: Package of the importing file

    Returns:
        Absolute module path

    Raises:
        ValueError: If relative import escapes the package
    """
    if level == 0:
        if not module:
            raise ValueError("absolute import must have module")
        return module

    if level - 1 > len(package):
        raise ValueError(f"relative import level {level} escapes package '{'.'.join(package)}'")

    base = list(package[: len(package) - (level - 1)])
    if module:
        base.append(module)
    if not base:
        raise ValueError("relative import results in empty module")
    return ".".join(base)


class _ImportVisitor(ast.NodeVisitor):
    """Collects imports in source order, tracking TYPE_CHECKING blocks."""

    def __init__(self, package: tuple[str, ...]) -> None:
        self.package = package
        self.imports: list[ImportStatement] = []
        self._type_checking_depth = 0

    def visit_Import(self, node: ast.Import) -> None:
        """Handle: import X, import X as Y."""
        for alias in node.names:
            self.imports.append(
                ImportStatement(module=alias.name, is_type_checking=self._in_type_checking)
            )

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        """Handle: from X import Y, from . import Y."""
        try:
            module = resolve_relative_import(node.module, node.level, self.package)
        except ValueError:
            module = "." * node.level + (node.module or "")

        self.imports.append(
            ImportStatement(
                module=module,
                names=tuple(alias.name for alias in node.names),
                is_type_checking=self._in_type_checking,
            )
        )

    def visit_If(self, node: ast.If) -> None:
        """Track TYPE_CHECKING blocks (else branch is runtime code)."""
        if not _is_type_checking_test(node.test):
            self.generic_visit(node)
            return

        self._type_checking_depth += 1
        for child in node.body:
            self.visit(child)
        self._type_checking_depth -= 1
        for child in node.orelse:
            self.visit(child)

    @property
    def _in_type_checking(self) -> bool:
        return self._type_checking_depth > 0


def _is_type_checking_test(test: ast.expr) -> bool:
    # if TYPE_CHECKING:
    if isinstance(test, ast.Name) and test.id == "TYPE_CHECKING":
        return True
    # if typing.TYPE_CHECKING:
    return (
        isinstance(test, ast.Attribute)
        and test.attr == "TYPE_CHECKING"
        and isinstance(test.value, ast.Name)
        and test.value.id == "typing"
    )


class PythonSourceProvider:
    """Module graph provider for a Python source tree.

    Every ``.py`` file below root is a root of the graph; identities are
    absolute POSIX paths. Module names are computed relative to root and,
    when it exists, to ``root/src`` as well, so both flat and src layouts
    resolve.

    Directories named ``__pycache__`` or ``node_modules`` and hidden
    directories are not scanned.
    """

    def __init__(self, root: Path, *, include_type_checking: bool = True) -> None:
        """Scan root for Python files.

        Args:
            root: Source tree to analyse
            include_type_checking: Count imports under ``if TYPE_CHECKING:``

        Raises:
            ConfigurationError: If root is not a directory
        """
        if root is None:
            raise TypeError("root must not be None")
        if not root.is_dir():
            raise ConfigurationError(str(root), "source root is not a directory")

        self._root = root.resolve()
        self._include_type_checking = include_type_checking
        self._files: dict[str, tuple[str, ...] | None] = {}
        self._modules: dict[str, str] = {}
        self._cache: dict[str, tuple[str, ...]] = {}
        self._scan()

    def _scan(self) -> None:
        search_roots = [self._root]
        if (self._root / "src").is_dir():
            search_roots.append(self._root / "src")

        for path in sorted(self._root.rglob("*.py")):
            relative = path.relative_to(self._root)
            if any(part in _SKIPPED_DIRS or part.startswith(".") for part in relative.parts[:-1]):
                continue

            identity = path.as_posix()
            package: tuple[str, ...] | None = None
            for search_root in search_roots:
                if not path.is_relative_to(search_root):
                    continue
                parts = module_parts(path.relative_to(search_root))
                if parts is None:
                    continue
                self._modules.setdefault(".".join(parts), identity)
                # most specific root wins for relative imports
                package = parts if path.name == "__init__.py" else parts[:-1]
            self._files[identity] = package

        logger.debug("scanned %d python files under %s", len(self._files), self._root)

    @property
    def root(self) -> Path:
        """Resolved source root."""
        return self._root

    def roots(self) -> Sequence[str]:
        return tuple(self._files)

    def is_resolved(self, identity: str) -> bool:
        return identity in self._files

    def imports_of(self, identity: str) -> Sequence[str]:
        """Resolved imports of a scanned file, in source order.

        Raises:
            ProviderError: If the file cannot be read or parsed
        """
        if identity not in self._files:
            return ()
        cached = self._cache.get(identity)
        if cached is None:
            cached = self._collect(identity)
            self._cache[identity] = cached
        return cached

    def _collect(self, identity: str) -> tuple[str, ...]:
        path = Path(identity)
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ProviderError(identity, f"cannot read file: {e}") from e

        try:
            tree = ast.parse(source, filename=identity)
        except SyntaxError as e:
            raise ProviderError(identity, f"syntax error: {e}") from e

        visitor = _ImportVisitor(self._files[identity] or ())
        visitor.visit(tree)

        targets: dict[str, None] = {}
        for statement in visitor.imports:
            if statement.is_type_checking and not self._include_type_checking:
                continue
            for target in self._resolve(statement):
                targets.setdefault(target)
        return tuple(targets)

    def _resolve(self, statement: ImportStatement) -> list[str]:
        """Targets of one statement: submodule files first, else the module."""
        resolved: list[str] = []
        module_target = self._modules.get(statement.module, statement.module)

        for name in statement.names:
            submodule = self._modules.get(f"{statement.module}.{name}")
            resolved.append(submodule if submodule is not None else module_target)

        if not statement.names:
            resolved.append(module_target)
        return resolved
