"""Project configuration models (``metacreator.json``)."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .traits import DiscreteSet, NumericRange, TraitSpec


DEFAULT_SIZE = 10000


def literal_decimals(value: Any) -> int:
    """Count the decimals in a configured number's literal form.

    ``2.50`` parsed from JSON is the float ``2.5`` and yields 1; integral
    floats such as ``3.0`` yield 0. String literals are taken verbatim, so
    ``"2.50"`` yields 2. Floats down to 1e-6 are read in fixed notation, so
    ``5e-05`` yields 5; smaller ones keep their exponent form.
    """
    if isinstance(value, str):
        text = value.strip()
    elif isinstance(value, float) and not value.is_integer():
        text = repr(value)
        if abs(value) >= 1e-6:
            text = format(Decimal(text), "f")
    else:
        return 0
    if "." not in text:
        return 0
    return len(text.split(".", 1)[1])


class OutputConfig(BaseModel):
    """Where and at what size images are written."""

    path: str = "outputs"
    width: int = Field(default=500, gt=0)
    height: int = Field(default=500, gt=0)


class MetadataTemplate(BaseModel):
    """Fields copied into every metadata record."""

    model_config = ConfigDict(populate_by_name=True)

    name_prefix: str = Field(default="", alias="namePrefix")
    description: str = ""
    image_base_uri: str = Field(default="", alias="imageBaseUri")
    external_url: str = Field(default="", alias="externalUrl")


class TraitConfig(BaseModel):
    """Raw trait entry as written in the config file."""

    chance: float
    range: list[Any] | None = None
    values: list[Any] | None = None

    @model_validator(mode="after")
    def _check_kind(self) -> "TraitConfig":
        has_range = bool(self.range)
        has_values = bool(self.values)
        if has_range == has_values:
            raise ValueError("exactly one of 'range' or 'values' is required")
        if has_range:
            if len(self.range) != 2:
                raise ValueError("'range' must be [min, max]")
            for bound in self.range:
                if isinstance(bound, bool):
                    raise ValueError(f"range bound {bound!r} is not a number")
                try:
                    float(bound)
                except (TypeError, ValueError):
                    raise ValueError(f"range bound {bound!r} is not a number") from None
        return self

    def to_spec(self, key: str) -> TraitSpec:
        if self.range:
            low, high = self.range
            kind = NumericRange(
                min=float(low),
                max=float(high),
                precision=literal_decimals(high),
            )
        else:
            kind = DiscreteSet(values=list(self.values))
        return TraitSpec(key=key, chance=self.chance, kind=kind)


class ProjectConfig(BaseModel):
    """Semantic shape of a project's generation config."""

    layers: list[str] = Field(min_length=1)
    size: int = Field(default=DEFAULT_SIZE, gt=0, strict=True)
    seed: int | str | None = None
    png: bool = False
    output: OutputConfig = Field(default_factory=OutputConfig)
    metadata: MetadataTemplate = Field(default_factory=MetadataTemplate)
    traits: dict[str, TraitConfig] = Field(default_factory=dict)

    @field_validator("layers", mode="before")
    @classmethod
    def _layer_names(cls, value: Any) -> Any:
        # Layers may be given as a mapping; only its key order matters.
        if isinstance(value, dict):
            return list(value.keys())
        return value

    @field_validator("layers")
    @classmethod
    def _unique_layers(cls, value: list[str]) -> list[str]:
        seen = set()
        for name in value:
            if name in seen:
                raise ValueError(f"layer '{name}' is listed twice")
            seen.add(name)
        return value

    @property
    def image_format(self) -> str:
        return "png" if self.png else "jpg"

    def trait_specs(self) -> list[TraitSpec]:
        """Trait specs in declaration order."""
        return [cfg.to_spec(key) for key, cfg in self.traits.items()]
