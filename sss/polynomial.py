# -*- coding: utf-8 -*-
"""
    Secret Polynomial
    ~~~~~

    Builds the random polynomial hiding the secret and evaluates it at the
    participants' x-coordinates.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Sequence, Tuple

import gmpy2

from sss.errors import InvalidParameterError
from sss.field import check_identifiers, sample_uniform_mod


class Share(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class Polynomial:
    """
    Polynomial over Z/pZ with coefficients ordered from the highest degree
    down, so the last coefficient is the constant term P(0), the secret.
    """
    coefficients: Tuple[int, ...] = field(repr=False)

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    @property
    def threshold(self) -> int:
        return len(self.coefficients)

    def render(self) -> str:
        """Human readable form, e.g. '7X^2 + 3X + 11'."""
        terms = []
        for i, coef in enumerate(self.coefficients):
            power = self.degree - i
            if power == 0:
                terms.append(str(coef))
            elif power == 1:
                terms.append(f"{coef}X")
            else:
                terms.append(f"{coef}X^{power}")
        return " + ".join(terms)


def build_polynomial(secret, k, p, rng) -> Polynomial:
    """
    Build a degree k-1 polynomial whose constant term is the secret.

    Args:
        secret: The secret, 0 <= secret < p.
        k: Threshold, number of shares needed to reconstruct. k == 1 gives the
            constant polynomial and no secrecy; callers needing secrecy must
            reject k < 2 themselves.
        p: Field prime.
        rng: RandomSource for the k-1 random coefficients.

    Returns:
        Polynomial with k coefficients.
    """
    if k < 1:
        raise InvalidParameterError(f"Threshold must be at least 1, got {k}")
    if not 0 <= secret < p:
        raise InvalidParameterError(f"Secret must lie in [0, {p})")

    coefficients = [sample_uniform_mod(p, rng) for _ in range(k - 1)]
    coefficients.append(int(secret))
    return Polynomial(tuple(coefficients))


def compute_share(x, polynomial, p) -> int:
    """Evaluate the polynomial at x modulo p using Horner's method."""
    x = gmpy2.mpz(x)
    result = gmpy2.mpz(0)
    for coef in polynomial.coefficients:
        result = (result * x + coef) % p
    return int(result)


def compute_all_shares(xs: Sequence[int], polynomial: Polynomial, p: int) -> List[Share]:
    """
    Compute one share per participant.

    Raises:
        DuplicateOrZeroIdentifierError: If xs contains zero or repeats a value
            modulo p.
    """
    check_identifiers(xs, p)
    return [Share(int(x), compute_share(x, polynomial, p)) for x in xs]
