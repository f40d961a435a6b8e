"""Roll auxiliary traits for each item from the shared sequencer."""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from ..core.models import DiscreteSet, NumericRange, TraitSpec
from .sequencer import DeterministicSequencer


logger = logging.getLogger(__name__)


def round_half_up(value: float, precision: int) -> int | float:
    """Round a rolled numeric trait value.

    Precision 0 rounds ties toward positive infinity. Otherwise the exact
    binary value is rounded like fixed-point formatting, ties away from zero.
    Returns an int when ``precision`` is 0 or the rounded value is integral.
    """
    if precision == 0:
        return math.floor(value + 0.5)
    quantum = Decimal(1).scaleb(-precision)
    rounded = float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
    return int(rounded) if rounded.is_integer() else rounded


def resolve_value(spec: TraitSpec, value_roll: float) -> Any:
    """Map a value roll onto the trait's range or option list."""
    kind = spec.kind
    if isinstance(kind, NumericRange):
        return round_half_up(value_roll * kind.max + kind.min, kind.precision)
    if isinstance(kind, DiscreteSet):
        return kind.values[int(value_roll * len(kind.values))]
    raise TypeError(f"Unknown trait kind for '{spec.key}': {type(kind).__name__}")


class TraitAssigner:
    """Rolls every trait spec for an item, two draws per spec.

    Both draws happen even when the trait does not apply, so the number of
    values consumed per item never depends on the outcome.

    Args:
        specs: Trait specs in declaration order
        total: Collection size, the scale ``chance`` is expressed against
        sequencer: Shared sequencer
    """

    def __init__(
        self,
        specs: list[TraitSpec],
        total: int,
        sequencer: DeterministicSequencer,
    ) -> None:
        self.specs = list(specs)
        self.total = total
        self.sequencer = sequencer

    def assign(self, attributes: dict[str, Any]) -> dict[str, Any]:
        """Roll all traits and merge applied values into ``attributes``.

        Trait keys share the namespace with layer keys; an applied trait
        overwrites a layer attribute of the same name in place.

        Returns:
            The same ``attributes`` mapping, updated
        """
        rolls = [(self.sequencer.next(), self.sequencer.next()) for _ in self.specs]

        for spec, (chance_roll, value_roll) in zip(self.specs, rolls):
            if int(chance_roll * self.total) >= spec.chance:
                continue
            attributes[spec.key] = resolve_value(spec, value_roll)
            logger.debug(f"[Traits] applied {spec.key}={attributes[spec.key]!r}")

        return attributes
