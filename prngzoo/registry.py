"""Name -> engine class lookup."""

from __future__ import annotations

from .generator import Generator
from .gjrand import GJrand64
from .jsf import JSF32, JSF64
from .lfsr import Seiran, Shioi
from .lxm import L32X64Mix, L64X128Mix
from .msws import MiddleSquareWeylSequence64
from .pcg import (PcgMcgXshRr32, PcgMcgXshRs32, PcgMcgXslRr32, PcgRxsMXs32, PcgRxsMXs64,
                  PcgXshRr32, PcgXshRr64, PcgXshRs32, PcgXslRr32, PcgXslRr64, PcgXslRrRr64)
from .romu import RomuDuo, RomuDuoJr, RomuQuad, RomuTrio, RomuTrio32
from .sfc import SFC32, SFC64
from .splitmix import SplitMix64
from .tyche import Tyche, Tychei
from .xoroshiro import Xoroshiro1024PlusPlus, Xoroshiro1024Star, Xoroshiro1024StarStar

ENGINES = (
    SplitMix64,
    Xoroshiro1024Star, Xoroshiro1024StarStar, Xoroshiro1024PlusPlus,
    PcgXshRr32, PcgXshRs32, PcgXslRr32, PcgRxsMXs32, PcgRxsMXs64, PcgXslRrRr64,
    PcgXshRr64, PcgXslRr64, PcgMcgXshRr32, PcgMcgXshRs32, PcgMcgXslRr32,
    RomuDuo, RomuDuoJr, RomuTrio, RomuTrio32, RomuQuad,
    SFC32, SFC64, JSF32, JSF64, GJrand64,
    L32X64Mix, L64X128Mix,
    MiddleSquareWeylSequence64,
    Seiran, Shioi,
    Tyche, Tychei,
)


def normalize(name: str) -> str:
    """'Xoroshiro 1024**' and 'xoroshiro1024_starstar' map to the same key."""
    key = name.lower().replace("**", "starstar").replace("*", "star").replace("++", "plusplus")
    return "".join(ch for ch in key if ch.isalnum())


ALGORITHMS = {}
for _cls in ENGINES:
    ALGORITHMS[normalize(_cls.__name__)] = _cls
    ALGORITHMS.setdefault(normalize(_cls.name), _cls)


def lookup(name: str):
    try:
        return ALGORITHMS[normalize(name)]
    except KeyError:
        raise KeyError(f"unknown algorithm {name!r}") from None


def create_engine(name: str, *seed):
    return lookup(name)(*seed)


def create(name: str, *seed) -> Generator:
    return Generator(create_engine(name, *seed))
