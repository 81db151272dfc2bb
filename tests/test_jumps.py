"""Jump-ahead operations against brute-force stepping."""

import pytest

import prngzoo as pz
from prngzoo.bit_helpers import MASK32, MASK64, lcg_advance

PCG_ENGINES = [pz.PcgXshRr32, pz.PcgXshRs32, pz.PcgXslRr32, pz.PcgRxsMXs32, pz.PcgRxsMXs64,
               pz.PcgXslRrRr64, pz.PcgXshRr64, pz.PcgXslRr64,
               pz.PcgMcgXshRr32, pz.PcgMcgXshRs32, pz.PcgMcgXslRr32]


@pytest.mark.parametrize("cls", PCG_ENGINES, ids=lambda c: c.__name__)
def test_pcg_jump_equals_stepping(cls):
    stepped = cls(123456789)
    jumped = stepped.copy()
    stepped.random_raw(1000)
    jumped.jump(1000)
    assert jumped.state == stepped.state
    assert jumped.advance() == stepped.advance()


@pytest.mark.parametrize("cls", PCG_ENGINES, ids=lambda c: c.__name__)
def test_pcg_negative_jump_steps_back(cls):
    engine = cls(99)
    start = engine.state
    first = engine.advance()
    engine.random_raw(500)
    engine.jump(-501)
    assert engine.state == start
    assert engine.advance() == first


def test_lxm_jump_advances_only_the_lcg():
    engine = pz.L64X128Mix(0x1111, 0x2222, 0x3333, 0x4444)
    a, s, x0, x1 = engine.state
    engine.jump()
    assert engine.state == (a, (0xD1342543DE82EF95 * s + a) & MASK64, x0, x1)


def test_l32x64mix_long_jump_is_2_pow_16_steps():
    engine = pz.L32X64Mix(0x12345, 0xABCDEF, 3, 5)
    a, s, x0, x1 = engine.state
    assert engine.long_jump_steps == 1 << 16
    x = s
    for _ in range(engine.long_jump_steps):
        x = (0xADB4A92D * x + a) & MASK32
    engine.long_jump()
    assert engine.state == (a, x, x0, x1)


def test_l64x128mix_long_jump_is_2_pow_32_steps():
    engine = pz.L64X128Mix(0x12345, 0xABCDEF, 3, 5)
    other = engine.copy()
    a, s, x0, x1 = engine.state
    engine.long_jump()
    other.jump_lcg(engine.long_jump_steps)
    assert engine.state == other.state
    assert engine.state[1] == lcg_advance(s, 1 << 32, 0xD1342543DE82EF95, a, MASK64)
    assert engine.long_jump_steps == 1 << 32


@pytest.mark.parametrize("cls", [pz.Seiran, pz.Shioi], ids=lambda c: c.__name__)
def test_polynomial_jump_by_small_power(cls):
    # the polynomial x^k jumps exactly k steps
    engine = cls(0x0123456789ABCDEF, 0xFEDCBA9876543210)
    stepped = engine.copy()
    engine.jump_polynomial(1 << 10, 0)
    stepped.random_raw(10)
    assert engine.state == stepped.state


def test_shioi_jump64_closed_form_matches_polynomial():
    a = pz.Shioi(0x0123456789ABCDEF, 0xFEDCBA9876543210)
    b = a.copy()
    a.jump64()
    b.jump_polynomial(0x3, 0x0)
    assert a.state == b.state


@pytest.mark.parametrize("cls", [pz.Seiran, pz.Shioi], ids=lambda c: c.__name__)
def test_named_jumps_change_state(cls):
    engine = cls(1, 2)
    seen = {engine.state}
    for jump in (engine.jump32, engine.jump64, engine.jump96):
        jump()
        assert engine.state not in seen
        assert engine.state != (0, 0)
        seen.add(engine.state)
