# prngzoo/__init__.py
"""
Non-cryptographic PRNG families behind one generator API.
"""

from .engine import Engine, INITIAL_ROLL
from .entropy import OsEntropy
from .generator import Generator
from .config import GeneratorConfig
from .registry import ALGORITHMS, ENGINES, create, create_engine, lookup
from .streams import split_streams, run_streams
from .splitmix import SplitMix64, derive_seed_words
from .xoroshiro import Xoroshiro1024Star, Xoroshiro1024StarStar, Xoroshiro1024PlusPlus
from .pcg import (PcgXshRr32, PcgXshRs32, PcgXslRr32, PcgRxsMXs32, PcgRxsMXs64, PcgXslRrRr64,
                  PcgXshRr64, PcgXslRr64, PcgMcgXshRr32, PcgMcgXshRs32, PcgMcgXslRr32)
from .romu import RomuDuo, RomuDuoJr, RomuTrio, RomuTrio32, RomuQuad
from .sfc import SFC32, SFC64
from .jsf import JSF32, JSF64
from .gjrand import GJrand64
from .lxm import L32X64Mix, L64X128Mix
from .msws import MiddleSquareWeylSequence64
from .lfsr import Seiran, Shioi
from .tyche import Tyche, Tychei

__all__ = [
    "Engine", "INITIAL_ROLL", "OsEntropy", "Generator", "GeneratorConfig",
    "ALGORITHMS", "ENGINES", "create", "create_engine", "lookup",
    "split_streams", "run_streams", "derive_seed_words",
    "SplitMix64",
    "Xoroshiro1024Star", "Xoroshiro1024StarStar", "Xoroshiro1024PlusPlus",
    "PcgXshRr32", "PcgXshRs32", "PcgXslRr32", "PcgRxsMXs32", "PcgRxsMXs64", "PcgXslRrRr64",
    "PcgXshRr64", "PcgXslRr64", "PcgMcgXshRr32", "PcgMcgXshRs32", "PcgMcgXslRr32",
    "RomuDuo", "RomuDuoJr", "RomuTrio", "RomuTrio32", "RomuQuad",
    "SFC32", "SFC64", "JSF32", "JSF64", "GJrand64",
    "L32X64Mix", "L64X128Mix",
    "MiddleSquareWeylSequence64",
    "Seiran", "Shioi",
    "Tyche", "Tychei",
]
