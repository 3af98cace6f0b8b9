# -*- coding: utf-8 -*-
"""
    Prime Field Helpers
    ~~~~~

    Random source, prime generation and uniform sampling in Z/pZ, built on
    the GMP integer routines exposed by gmpy2.

    The security of the sharing scheme rests entirely on the draws made here
    being uniform and unpredictable. A weak random source breaks the scheme.
"""

import threading
import time

import gmpy2
import sympy
from Cryptodome.Random import get_random_bytes
from Cryptodome.Util.number import bytes_to_long

from sss import param
from sss.errors import (DuplicateOrZeroIdentifierError, GenerationError,
                        InvalidParameterError)


class RandomSource:
    """
    GMP random state guarded by a lock.

    Every draw mutates the underlying state, so concurrent callers sharing one
    instance are serialized.
    """

    def __init__(self, seed):
        """
        Initialize the random source.

        Args:
            seed (int): Seed for the GMP random state. The same seed yields the
                same sequence of draws.
        """
        self._lock = threading.Lock()
        try:
            self._state = gmpy2.random_state(int(seed))
        except (TypeError, ValueError) as e:
            raise InvalidParameterError(f"Cannot seed random state: {e}") from e

    @classmethod
    def from_entropy(cls, num_bytes=param.SEED_BYTES):
        """Seed from the operating system's cryptographic entropy pool."""
        try:
            seed = bytes_to_long(get_random_bytes(num_bytes))
        except (OSError, RuntimeError, ValueError) as e:
            raise GenerationError(f"Entropy source unavailable: {e}") from e
        return cls(seed)

    @classmethod
    def from_time(cls):
        """
        Seed from the wall clock, in whole seconds.

        The seed is predictable. Only use this to reproduce the behaviour of
        the teaching walkthrough, never to protect a real secret.
        """
        return cls(int(time.time()))

    @classmethod
    def default(cls):
        if param.SEED_SOURCE == "time":
            return cls.from_time()
        if param.SEED_SOURCE != "entropy":
            raise InvalidParameterError(f"Unknown seed source: {param.SEED_SOURCE}")
        return cls.from_entropy()

    def urandomb(self, bit_count):
        """Uniform integer in [0, 2**bit_count)."""
        with self._lock:
            return gmpy2.mpz_urandomb(self._state, bit_count)

    def urandomm(self, modulus):
        """Uniform integer in [0, modulus)."""
        with self._lock:
            return gmpy2.mpz_random(self._state, modulus)


def generate_prime(bit_strength, rng):
    """
    Generate the field prime.

    A random odd number of at most bit_strength bits is drawn and the first
    prime at or above it is returned. This forward search is not uniform over
    the primes of that size.

    Args:
        bit_strength: Bit length of the random starting point.
        rng: RandomSource to draw from.

    Returns:
        p: The prime, as a native integer.

    Raises:
        InvalidParameterError: If bit_strength is not a positive integer.
        GenerationError: If the random draw or prime search fails.
    """
    if not isinstance(bit_strength, int) or bit_strength < 1:
        raise InvalidParameterError(f"Bit strength must be a positive integer, got {bit_strength!r}")

    try:
        candidate = gmpy2.bit_set(rng.urandomb(bit_strength), 0)
        if not gmpy2.is_prime(candidate):
            candidate = gmpy2.next_prime(candidate)
    except (OSError, RuntimeError) as e:
        raise GenerationError(f"Prime generation failed: {e}") from e
    return int(candidate)


def sample_uniform_mod(modulus, rng):
    """Draw a field element uniformly from [0, modulus)."""
    if not isinstance(modulus, (int, type(gmpy2.mpz(0)))) or modulus <= 0:
        raise InvalidParameterError(f"Modulus must be a positive integer, got {modulus!r}")
    try:
        return int(rng.urandomm(modulus))
    except (OSError, RuntimeError) as e:
        raise GenerationError(f"Random sampling failed: {e}") from e


def check_identifiers(xs, p):
    """
    Check that participant x-coordinates are usable in Z/pZ.

    Raises:
        DuplicateOrZeroIdentifierError: If some x is 0 mod p (its share would
            be the secret itself) or two x collide mod p.
    """
    seen = set()
    for x in xs:
        residue = x % p
        if residue == 0:
            raise DuplicateOrZeroIdentifierError(f"Identifier {x} is zero modulo {p}")
        if residue in seen:
            raise DuplicateOrZeroIdentifierError(f"Identifier {x} collides with another modulo {p}")
        seen.add(residue)


def check_prime(p):
    """Reject a caller-supplied modulus that is not a prime."""
    if not sympy.isprime(p):
        raise InvalidParameterError(f"Modulus {p} is not prime")
    return int(p)
