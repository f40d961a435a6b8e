"""Layer catalog: ordered layers with their capped variants."""

import logging
import math
from typing import Iterable, Mapping

from ..core.errors import ConfigError
from ..core.models import LayerDefinition, VariantAsset


logger = logging.getLogger(__name__)


class LayerCatalog:
    """Ordered set of layers, each holding its ordered variants.

    Layer order is fixed at construction and doubles as paint order.
    The catalog owns the variants' usage counters.

    Args:
        layers: Layer definitions in paint order
    """

    def __init__(self, layers: Iterable[LayerDefinition]) -> None:
        self._layers: dict[str, LayerDefinition] = {}
        for layer in layers:
            if layer.key in self._layers:
                raise ConfigError(f"Layer '{layer.key}' is defined twice")
            if not layer.variants:
                raise ConfigError(f"Layer '{layer.key}' has no variants")
            self._layers[layer.key] = layer

    @classmethod
    def from_groups(
        cls,
        layer_order: list[str],
        groups: Mapping[str, list[VariantAsset]],
    ) -> "LayerCatalog":
        """Build a catalog from asset groups keyed by layer name.

        Raises:
            ConfigError: If a configured layer has no asset group
        """
        layers = []
        for key in layer_order:
            if key not in groups:
                raise ConfigError(f'Layer "{key}" does not have a directory')
            layers.append(LayerDefinition(key=key, variants=list(groups[key])))
        return cls(layers)

    @property
    def keys(self) -> list[str]:
        return list(self._layers.keys())

    @property
    def layers(self) -> list[LayerDefinition]:
        return list(self._layers.values())

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self):
        return iter(self._layers.values())

    def get(self, key: str) -> LayerDefinition:
        try:
            return self._layers[key]
        except KeyError:
            raise ConfigError(f"Unknown layer '{key}'") from None

    def pick(self, key: str, index: int) -> VariantAsset:
        """Return the variant at ``index`` within layer ``key``."""
        return self.get(key).variants[index]

    def combination_space(self) -> int:
        """Upper bound on distinct compositions, ignoring usage caps."""
        return math.prod(len(layer.variants) for layer in self._layers.values())

    def usage(self) -> dict[str, dict[str, int]]:
        """Snapshot of ``used_count`` per layer and variant name."""
        return {
            layer.key: {v.name: v.used_count for v in layer.variants}
            for layer in self._layers.values()
        }
