# -*- coding: utf-8 -*-
"""
    Lagrange Reconstruction
    ~~~~~

    Recovers P(0) from k shares by Lagrange interpolation at x = 0.
"""

import gmpy2

from sss.errors import (InsufficientSharesError, InvalidParameterError,
                        NonInvertibleElementError)
from sss.field import check_identifiers


def compute_lagrange_coefficients(xs, p):
    """
    Lagrange basis polynomials evaluated at 0.

    The basis polynomial of index i is 1 at x_i and 0 at every other x_j, so
    its value at 0 is

        alpha_i = prod_{j != i} x_j * (x_j - x_i)^-1  (mod p)

    Args:
        xs: Exactly k pairwise distinct, nonzero x-coordinates.
        p: Field prime.

    Returns:
        alphas: One coefficient per x, in the same order.

    Raises:
        DuplicateOrZeroIdentifierError: If xs contains zero or repeats a value
            modulo p.
        NonInvertibleElementError: If a denominator has no inverse, which only
            happens when p is not prime.
    """
    check_identifiers(xs, p)

    alphas = []
    for i, x_i in enumerate(xs):
        numerator = denominator = gmpy2.mpz(1)
        for j, x_j in enumerate(xs):
            if i != j:
                numerator = (numerator * x_j) % p
                denominator = (denominator * (x_j - x_i)) % p
        try:
            inv_denominator = gmpy2.invert(denominator, p)
        except ZeroDivisionError as e:
            raise NonInvertibleElementError(
                f"{denominator} has no inverse modulo {p}") from e
        alphas.append(int((numerator * inv_denominator) % p))
    return alphas


def reconstruct(alphas, shares_y, p):
    """Combine share values with their Lagrange coefficients: sum(alpha_i * y_i) mod p."""
    if len(alphas) != len(shares_y):
        raise InvalidParameterError(
            f"Got {len(alphas)} coefficients for {len(shares_y)} shares")

    secret = gmpy2.mpz(0)
    for alpha, y in zip(alphas, shares_y):
        secret = (secret + gmpy2.mpz(alpha) * y) % p
    return int(secret)


def reconstruct_secret(shares, k, p):
    """
    Reconstruct the secret from (x, y) shares.

    Only the first k shares are used. Fewer than k shares is an error, there
    is no partial reconstruction.
    """
    if k < 1:
        raise InvalidParameterError(f"Threshold must be at least 1, got {k}")
    if len(shares) < k:
        raise InsufficientSharesError(f"Not enough shares. Need {k}, got {len(shares)}")

    chosen = shares[:k]
    xs = [x for x, _ in chosen]
    ys = [y for _, y in chosen]
    return reconstruct(compute_lagrange_coefficients(xs, p), ys, p)
