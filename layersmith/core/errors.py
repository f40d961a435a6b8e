"""Error taxonomy for layersmith.

Every error here is fatal for a run. Nothing is retried across runs:
rerunning with the same seed reproduces the same failure point.
"""


class LayersmithError(Exception):
    """Base class for all layersmith errors."""


class ConfigError(LayersmithError):
    """Missing or invalid project configuration.

    Raised for an unknown layer directory, a non-positive or non-numeric
    collection size, a missing config file, or a malformed trait definition.
    """


class GenerationExhausted(LayersmithError):
    """No unique composition could be found within the retry budget.

    Signals that the configured layer/variant space is too small for the
    requested collection size.
    """

    def __init__(self, message: str, index: int | None = None, attempts: int = 0):
        super().__init__(message)
        self.index = index
        self.attempts = attempts


class PlannerError(LayersmithError):
    """Unique (1-of-1) placement is impossible for the requested size."""
