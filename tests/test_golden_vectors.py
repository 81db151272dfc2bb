"""Published output vectors and numpy's bit generators as external oracles."""

import numpy as np
import pytest

import prngzoo as pz


def test_splitmix64_seed_zero():
    engine = pz.SplitMix64(0)
    assert [engine.advance() for _ in range(3)] == [
        0xE220A8397B1DCDAF, 0x6E789E6AA1B965F4, 0x06C45D188009454F]


def test_pcg32_demo_vector():
    # pcg32_srandom_r(&rng, 42u, 54u)
    engine = pz.PcgXshRr32(42, 54)
    assert [engine.advance() for _ in range(6)] == [
        0xA15C02B7, 0x7B47F409, 0xBA1D3330, 0x83D2F293, 0xBFA4784B, 0xCBED606E]


def test_pcg64_demo_vector():
    # pcg64_srandom_r(&rng, 42, 54)
    engine = pz.PcgXslRr64(42, 54)
    assert [engine.advance() for _ in range(4)] == [
        0x86B1DA1D72062B68, 0x1304AA46C9853D39, 0xA3670E9E0DD50358, 0xF9090E529A7DAE00]


def _numpy_pcg64(engine):
    s, inc = engine._get_lcg()
    bg = np.random.PCG64()
    bg.state = {"bit_generator": "PCG64", "state": {"state": s, "inc": inc},
                "has_uint32": 0, "uinteger": 0}
    return bg


def test_pcg_xsl_rr_64_matches_numpy_pcg64():
    engine = pz.PcgXslRr64(0xDEADBEEFCAFEF00D1234, 987654321)
    bg = _numpy_pcg64(engine)
    expected = [int(x) for x in bg.random_raw(100)]
    assert [int(x) for x in engine.random_raw(100)] == expected


def test_pcg_xsl_rr_64_jump_matches_numpy_advance():
    engine = pz.PcgXslRr64(2024, 7)
    bg = _numpy_pcg64(engine)
    delta = (1 << 100) + 12345
    engine.jump(delta)
    bg.advance(delta)
    assert [int(x) for x in engine.random_raw(8)] == [int(x) for x in bg.random_raw(8)]


def test_sfc64_matches_numpy_sfc64():
    engine = pz.SFC64(1, 2, 3)
    a, b, c, w = engine.state
    bg = np.random.SFC64()
    bg.state = {"bit_generator": "SFC64",
                "state": {"state": np.array([a, b, c, w], dtype=np.uint64)},
                "has_uint32": 0, "uinteger": 0}
    expected = [int(x) for x in bg.random_raw(100)]
    assert [int(x) for x in engine.random_raw(100)] == expected


def test_default_seeds_are_deterministic():
    for cls in pz.ENGINES:
        a, b = cls(), cls()
        assert [a.advance() for _ in range(8)] == [b.advance() for _ in range(8)], cls.__name__


# first outputs of the published C reference implementations
REFERENCE_OUTPUTS = [
    (pz.Xoroshiro1024StarStar, tuple(range(1, 17)), [11520, 17280, 23040, 28800]),
    (pz.RomuQuad, (1, 2, 3, 4),
     [2, 4503599627370500, 15187511025750758165, 14994429473373881959]),
    (pz.JSF64, (5,), [12472740083303659309, 9717053184264117311]),
    (pz.L64X128Mix, (3, 5, 7, 11), [2251185718546046279, 7131264019340176812]),
    (pz.L32X64Mix, (3, 5, 7, 11), [2171883478, 2831427633]),
    (pz.Tyche, (0x123456789, 7), [1880415692, 3168581908]),
    (pz.Seiran, (1, 2), [14495514625, 5188151729270554625]),
    (pz.Shioi, (0x8000000000000001, 2), [17742438510613686402]),
    (pz.MiddleSquareWeylSequence64, (3, 4), [3581681882176207096]),
    (pz.SFC32, (1, 2, 3), [428635494, 4270309710]),
]


@pytest.mark.parametrize("cls,seed,expected", REFERENCE_OUTPUTS,
                         ids=[c[0].__name__ for c in REFERENCE_OUTPUTS])
def test_reference_output_literals(cls, seed, expected):
    engine = cls(*seed)
    assert [engine.advance() for _ in expected] == expected
