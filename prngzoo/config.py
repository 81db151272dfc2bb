from __future__ import annotations

import operator
from dataclasses import dataclass

from .generator import Generator
from .registry import lookup

# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GeneratorConfig:
    algorithm: str
    seed: tuple = ()
    reseed: bool = False

    def __post_init__(self):
        try:
            lookup(self.algorithm)
        except KeyError as e:
            raise ValueError(str(e)) from None

        if isinstance(self.seed, int):
            seed = (self.seed,)
        else:
            seed = tuple(operator.index(s) for s in self.seed)
        if any(s < 0 for s in seed):
            raise ValueError("seed words must be non-negative")
        object.__setattr__(self, "seed", seed)

        reseed = bool(self.reseed)
        if reseed and seed:
            raise ValueError("give either an explicit seed or reseed=True, not both")
        object.__setattr__(self, "reseed", reseed)

    @property
    def engine_class(self):
        return lookup(self.algorithm)

    def build(self, entropy=None) -> Generator:
        engine = self.engine_class(*self.seed)
        if self.reseed:
            engine.reseed(entropy)
        return Generator(engine)
