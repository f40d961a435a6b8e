"""layersmith: deterministic layered artwork collections with trait metadata."""

__version__ = "0.1.0"
