"""Weight configurations — every probability table the generator reads."""

from wod_engine.config.weights import (
    CLASSIC_WEIGHTS,
    DEFAULT_WEIGHTS,
    LINCHPIN_WEIGHTS,
    WEIGHT_VERSIONS,
    WeightConfig,
    get_weight_config,
)

__all__ = [
    "CLASSIC_WEIGHTS",
    "DEFAULT_WEIGHTS",
    "LINCHPIN_WEIGHTS",
    "WEIGHT_VERSIONS",
    "WeightConfig",
    "get_weight_config",
]
