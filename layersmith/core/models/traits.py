"""Auxiliary trait specifications."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NumericRange(BaseModel):
    """Numeric trait value: ``roll * max + min`` rounded to ``precision``."""

    model_config = ConfigDict(frozen=True)

    type: Literal["range"] = "range"
    min: float
    max: float
    precision: int = Field(default=0, ge=0)


class DiscreteSet(BaseModel):
    """Trait value picked from an ordered list of options."""

    model_config = ConfigDict(frozen=True)

    type: Literal["values"] = "values"
    values: list[Any] = Field(min_length=1)


TraitKind = Annotated[Union[NumericRange, DiscreteSet], Field(discriminator="type")]


class TraitSpec(BaseModel):
    """An optional attribute rolled once per item.

    ``chance`` is expressed against the collection size: the trait applies when
    ``floor(chance_roll * size) < chance``.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    chance: float
    kind: TraitKind

    @model_validator(mode="after")
    def _check_key(self) -> "TraitSpec":
        if not self.key.strip():
            raise ValueError("trait key must not be empty")
        return self
