import importlib

import pytest
import sympy

from sss import param
from sss.errors import (DuplicateOrZeroIdentifierError, GenerationError,
                        InvalidParameterError)
from sss.field import (RandomSource, check_identifiers, check_prime,
                       generate_prime, sample_uniform_mod)


def test_same_seed_same_draws():
    a = RandomSource(42)
    b = RandomSource(42)
    assert [a.urandomb(64) for _ in range(5)] == [b.urandomb(64) for _ in range(5)]


def test_generate_prime():
    rng = RandomSource(2024)
    for bits in (8, 14, 64, 256):
        p = generate_prime(bits, rng)
        assert isinstance(p, int)
        assert sympy.isprime(p)
        assert p.bit_length() <= bits + 1


def test_generate_prime_one_bit():
    # the only odd 1-bit value is 1, whose next prime is 2
    assert generate_prime(1, RandomSource(0)) == 2


@pytest.mark.parametrize("bits", [0, -3, 2.5])
def test_generate_prime_bad_bit_strength(bits):
    with pytest.raises(InvalidParameterError):
        generate_prime(bits, RandomSource(0))


def test_sample_uniform_mod_range():
    rng = RandomSource(5)
    draws = [sample_uniform_mod(17, rng) for _ in range(500)]
    assert all(0 <= d < 17 for d in draws)
    # 500 draws over 17 values hit every residue
    assert set(draws) == set(range(17))


def test_sample_uniform_mod_rejects_non_positive_modulus():
    with pytest.raises(InvalidParameterError):
        sample_uniform_mod(0, RandomSource(5))


def test_from_entropy_differs():
    a = RandomSource.from_entropy()
    b = RandomSource.from_entropy()
    assert a.urandomb(256) != b.urandomb(256)


def test_default_seed_source(monkeypatch):
    monkeypatch.setattr(param, "SEED_SOURCE", "time")
    assert isinstance(RandomSource.default(), RandomSource)
    monkeypatch.setattr(param, "SEED_SOURCE", "dice")
    with pytest.raises(InvalidParameterError):
        RandomSource.default()


def test_check_prime():
    assert check_prime(17) == 17
    with pytest.raises(InvalidParameterError):
        check_prime(15)


@pytest.mark.parametrize("xs", [[0, 1, 2], [1, 2, 2], [1, 2, 19], [17, 3]])
def test_check_identifiers_rejects(xs):
    with pytest.raises(DuplicateOrZeroIdentifierError):
        check_identifiers(xs, 17)


def test_check_identifiers_accepts():
    check_identifiers([1, 2, 3, 16], 17)


class ExhaustedSource:
    """Random source whose entropy pool has gone away."""

    def urandomb(self, bit_count):
        raise OSError("entropy pool unavailable")

    def urandomm(self, modulus):
        raise OSError("entropy pool unavailable")


def test_generate_prime_failing_source():
    with pytest.raises(GenerationError) as excinfo:
        generate_prime(64, ExhaustedSource())
    assert isinstance(excinfo.value.__cause__, OSError)


def test_sample_uniform_mod_failing_source():
    with pytest.raises(GenerationError) as excinfo:
        sample_uniform_mod(17, ExhaustedSource())
    assert isinstance(excinfo.value.__cause__, OSError)


def test_from_entropy_failure(monkeypatch):
    def no_entropy(num_bytes):
        raise OSError("no entropy")

    monkeypatch.setattr("sss.field.get_random_bytes", no_entropy)
    with pytest.raises(GenerationError) as excinfo:
        RandomSource.from_entropy()
    assert isinstance(excinfo.value.__cause__, OSError)


@pytest.mark.parametrize("modulus", [17.5, "17", None])
def test_sample_uniform_mod_rejects_non_integer_modulus(modulus):
    with pytest.raises(InvalidParameterError):
        sample_uniform_mod(modulus, RandomSource(0))


def test_bad_seed():
    with pytest.raises(InvalidParameterError):
        RandomSource("not a seed")


def test_malformed_bit_strength_env(monkeypatch):
    monkeypatch.setenv("SSS_BIT_STRENGTH", "fourteen")
    try:
        with pytest.raises(InvalidParameterError, match="SSS_BIT_STRENGTH"):
            importlib.reload(param)
    finally:
        monkeypatch.delenv("SSS_BIT_STRENGTH")
        importlib.reload(param)
    assert param.BIT_STRENGTH == 14
