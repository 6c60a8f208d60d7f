"""Configuration file schema.

Decoded JSON/TOML is validated here before it becomes the domain
StructureConfig. Keys follow the camelCase spelling; snake_case and
kebab-case spellings are accepted as aliases.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool

from fences.domain.model.configuration import (
    DEFAULT_EXCLUDE,
    ExportPolicy,
    LayerConfig,
    StructureConfig,
)

if TYPE_CHECKING:
    from pydantic import ValidationError
    from pydantic_core import ErrorDetails

Pattern = Annotated[str, Field(min_length=1)]


def _spellings(camel: str, snake: str) -> AliasChoices:
    return AliasChoices(camel, snake, snake.replace("_", "-"))


class StrictFrozenModel(BaseModel):
    """Base for config schema models: immutable, extra keys forbidden."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class LayerSchema(StrictFrozenModel):
    """One entry of the ``layers`` table."""

    files: tuple[Pattern, ...]
    allow_imports: tuple[Pattern, ...] = Field(
        default=(), validation_alias=_spellings("allowImports", "allow_imports")
    )
    exports: tuple[Pattern, ...] | None = None

    def to_layer(self, name: str) -> LayerConfig:
        return LayerConfig(
            name=name,
            files=self.files,
            allow_imports=self.allow_imports,
            exports=self.exports,
        )


class StructureSchema(StrictFrozenModel):
    """Top-level configuration object (``[tool.fences]``)."""

    layers: dict[str, LayerSchema] = Field(default_factory=dict)
    exclude: tuple[Pattern, ...] = DEFAULT_EXCLUDE
    ignore_cycles: StrictBool = Field(
        default=False, validation_alias=_spellings("ignoreCycles", "ignore_cycles")
    )
    trace_file: Pattern | None = Field(
        default=None, validation_alias=_spellings("traceFile", "trace_file")
    )
    export_policy: ExportPolicy = Field(
        default=ExportPolicy.LAST_MATCH,
        validation_alias=_spellings("exportPolicy", "export_policy"),
    )

    def to_config(self) -> StructureConfig:
        """Build the domain configuration, layers in declaration order.

        Raises:
            ValueError: If a glob pattern cannot be compiled
        """
        return StructureConfig(
            layers={name: layer.to_layer(name) for name, layer in self.layers.items()},
            exclude=self.exclude,
            ignore_cycles=self.ignore_cycles,
            trace_file=Path(self.trace_file) if self.trace_file else None,
            export_policy=self.export_policy,
        )


def _describe(error: ErrorDetails, root: str) -> str:
    loc = [str(part) for part in error["loc"]]
    where = ".".join(loc[:-1]) or root
    if error["type"] == "extra_forbidden":
        return f"unexpected key '{loc[-1]}' in {where}"
    if error["type"] == "missing":
        return f"'{loc[-1]}' is required in {where}"
    return f"{'.'.join(loc) or root}: {error['msg']}"


def describe_validation_error(error: ValidationError, root: str = "configuration") -> str:
    """Render every problem of a ValidationError as ``<where>: <what>``.

    Args:
        error: Raised by model or adapter validation
        root: Name used for problems of the whole document
    """
    return "; ".join(_describe(details, root) for details in error.errors(include_url=False))
