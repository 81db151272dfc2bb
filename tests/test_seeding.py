"""Seeding, reseeding and seed validation."""

import pytest

import prngzoo as pz


class FakeEntropy:
    """Deterministic entropy source that records every request."""

    def __init__(self, fill=0x5A):
        self.fill = fill
        self.requests = []

    def get_nonzero_bytes(self, n):
        self.requests.append(n)
        return bytes((self.fill + i) % 255 + 1 for i in range(n))


class ShortEntropy:
    def get_nonzero_bytes(self, n):
        return b"\x01" * (n - 1)


def test_set_seed_rejects_missing_values():
    engine = pz.RomuTrio()
    with pytest.raises(ValueError):
        engine.set_seed()
    with pytest.raises(ValueError):
        engine.set_seed(None)
    with pytest.raises(ValueError):
        engine.set_seed([])
    with pytest.raises(ValueError):
        engine.set_seed(1, 2)


def test_set_seed_rejects_out_of_range_words():
    with pytest.raises(ValueError):
        pz.SplitMix64(-1)
    with pytest.raises(ValueError):
        pz.SplitMix64(1 << 64)
    with pytest.raises(ValueError):
        pz.JSF32(1 << 32)
    with pytest.raises(ValueError):
        pz.RomuDuo(1, 2, 3)


def test_all_zero_seed_rejected_for_absorbing_families():
    for cls in (pz.Xoroshiro1024Star, pz.RomuDuo, pz.RomuDuoJr, pz.RomuTrio, pz.RomuTrio32,
                pz.RomuQuad, pz.Seiran, pz.Shioi):
        with pytest.raises(ValueError):
            cls([0] * len(cls.seed_widths))


def test_lxm_xbg_part_must_be_nonzero():
    with pytest.raises(ValueError):
        pz.L64X128Mix(1, 2, 0, 0)
    with pytest.raises(ValueError):
        pz.L32X64Mix(1, 2, 0, 0)


def test_lxm_addend_forced_odd():
    assert pz.L32X64Mix(4, 0, 1, 1).state[0] == 5
    assert pz.L64X128Mix(0, 0, 1, 1).state[0] == 1


def test_pcg_increment_is_odd_and_mcg_state_is_3_mod_4():
    for seq in (0, 1, 54, (1 << 64) - 1):
        assert pz.PcgXshRr32(1, seq).increment & 1 == 1
    assert pz.PcgMcgXshRr32(8).state[0] % 4 == 3
    assert pz.PcgXshRr32(42).state == pz.PcgXshRr32(42, pz.pcg.PCG64_DEFAULT_INC >> 1).state
    assert pz.PcgXshRr32(42).increment == pz.pcg.PCG64_DEFAULT_INC


def test_seed_accepts_sequence_or_varargs():
    a = pz.RomuQuad(1, 2, 3, 4)
    b = pz.RomuQuad([1, 2, 3, 4])
    c = pz.RomuQuad((1, 2, 3, 4))
    assert a.state == b.state == c.state


def test_set_seed_resets_stream():
    engine = pz.SFC64(7, 8, 9)
    first = [engine.advance() for _ in range(5)]
    engine.set_seed(7, 8, 9)
    assert [engine.advance() for _ in range(5)] == first


def test_reseed_requests_bytes_sized_to_seed_widths():
    cases = [(pz.SplitMix64, 8), (pz.Xoroshiro1024Star, 128), (pz.GJrand64, 32),
             (pz.PcgXshRr32, 16), (pz.PcgRxsMXs32, 8), (pz.PcgXslRr64, 32),
             (pz.SFC64, 24), (pz.SFC32, 12), (pz.L32X64Mix, 16), (pz.Tyche, 12),
             (pz.MiddleSquareWeylSequence64, 16)]
    for cls, size in cases:
        source = FakeEntropy()
        cls().reseed(source)
        assert source.requests == [size], cls.__name__


def test_reseed_is_deterministic_given_the_source():
    a, b = pz.RomuTrio(), pz.RomuTrio()
    a.reseed(FakeEntropy(3))
    b.reseed(FakeEntropy(3))
    assert a.state == b.state
    assert a.state != pz.RomuTrio().state


def test_reseed_from_os_entropy():
    a, b = pz.Xoroshiro1024PlusPlus(), pz.Xoroshiro1024PlusPlus()
    a.reseed()
    b.reseed()
    assert a.state != b.state


def test_reseed_rejects_short_entropy():
    with pytest.raises(ValueError):
        pz.SplitMix64().reseed(ShortEntropy())


def test_l64x128mix_reseed_not_implemented():
    with pytest.raises(NotImplementedError):
        pz.L64X128Mix().reseed(FakeEntropy())


def test_os_entropy_bytes_are_nonzero():
    raw = pz.OsEntropy().get_nonzero_bytes(256)
    assert len(raw) == 256
    assert 0 not in raw


def test_copy_is_independent():
    a = pz.JSF64(5)
    b = a.copy()
    assert a.advance() == b.advance()
    a.advance()
    assert a.state != b.state


def test_derive_seed_words():
    w1 = pz.derive_seed_words(2024, ("worker", 0), 4)
    w2 = pz.derive_seed_words(2024, ("worker", 1), 4)
    assert len(w1) == 4 and w1 != w2
    assert w1 == pz.derive_seed_words(2024, ("worker", 0), 4)
    wide = pz.derive_seed_words(1, ("pcg",), 2, bits=128)
    assert all(0 <= w < (1 << 128) for w in wide)
    pz.PcgXslRr64(*wide)
    with pytest.raises(ValueError):
        pz.derive_seed_words(1, (), 0)


def test_sfc_counter_starts_at_one_and_counts_advances():
    for cls in (pz.SFC32, pz.SFC64):
        engine = cls(7, 8, 9)
        assert engine.counter == 1 + pz.INITIAL_ROLL
        engine.random_raw(5)
        assert engine.counter == 6 + pz.INITIAL_ROLL
        assert cls(7, 8, 9, 100).counter == 100 + pz.INITIAL_ROLL
