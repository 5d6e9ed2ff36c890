import math
from dataclasses import dataclass, fields


@dataclass(frozen=True)
class _Weights:
    def __post_init__(self):
        values = [getattr(self, f.name) for f in fields(self)]
        if any(v < 0 for v in values):
            raise ValueError("negative_weight")
        if not math.isclose(sum(values), 1.0, abs_tol=1e-9):
            raise ValueError("weights_must_sum_to_one")


@dataclass(frozen=True)
class WearWeights(_Weights):
    freshness: float = 0.35
    variety: float = 0.25
    season: float = 0.25
    formality: float = 0.15


@dataclass(frozen=True)
class PackingWeights(_Weights):
    season: float = 0.3
    formality: float = 0.3
    freshness: float = 0.25
    versatility: float = 0.15


WEAR_WEIGHTS = WearWeights()
PACKING_WEIGHTS = PackingWeights()
