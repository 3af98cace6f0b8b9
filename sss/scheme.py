# -*- coding: utf-8 -*-
"""
    Shamir Secret Sharing
    ~~~~~

    A sharing session: owns the field prime, the threshold, the number of
    shares and the random source, and drives prime generation, polynomial
    construction, share evaluation and reconstruction.
"""

import logging

from sss import param
from sss.errors import InsufficientSharesError, InvalidParameterError
from sss.field import (RandomSource, check_identifiers, check_prime, generate_prime,
                       sample_uniform_mod)
from sss.lagrange import compute_lagrange_coefficients, reconstruct, reconstruct_secret
from sss.polynomial import build_polynomial, compute_all_shares


class ShamirSecretSharing:
    """
    Implements (k, n) threshold secret sharing over Z/pZ.
    """

    def __init__(self, threshold, num_shares, bit_strength=param.BIT_STRENGTH,
                 prime=None, random_source=None):
        """
        Initialize the sharing session.

        Args:
            threshold: Number of shares required to reconstruct the secret.
            num_shares: Number of shares to generate.
            bit_strength: Bit length used to generate the prime when none is given.
            prime: Prime for the field. If None, one is generated.
            random_source: RandomSource for every draw. If None, one is created
                according to param.SEED_SOURCE.
        """
        if threshold < 1:
            raise InvalidParameterError(f"Threshold must be at least 1, got {threshold}")
        if num_shares < threshold:
            raise InvalidParameterError("Threshold cannot be greater than number of shares!")

        self.logger = logging.getLogger(__name__)
        self.threshold = threshold
        self.num_shares = num_shares
        self.rng = random_source if random_source is not None else RandomSource.default()

        if prime is None:
            self.prime = generate_prime(bit_strength, self.rng)
            self.logger.debug(f"Generated {self.prime.bit_length()}-bit prime p = {self.prime}")
        else:
            self.prime = check_prime(prime)

    def generate_secret(self):
        """Draw a random secret in [0, p)."""
        return sample_uniform_mod(self.prime, self.rng)

    def split(self, secret=None, xs=None):
        """
        Split a secret into shares.

        Args:
            secret: The secret, 0 <= secret < p. If None, a random one is drawn;
                the caller then recovers it only by reconstruction.
            xs: Distinct nonzero participant x-coordinates, one per share. If
                None, param.participant_ids is used.

        Returns:
            shares: List of Share(x, y).
        """
        if xs is None:
            xs = param.participant_ids(self.num_shares)
        if len(xs) != self.num_shares:
            raise InvalidParameterError(
                f"Expected {self.num_shares} identifiers, got {len(xs)}")
        check_identifiers(xs, self.prime)
        if secret is None:
            secret = self.generate_secret()

        polynomial = build_polynomial(secret, self.threshold, self.prime, self.rng)
        shares = compute_all_shares(xs, polynomial, self.prime)
        self.logger.debug(f"Split secret into {len(shares)} shares, threshold {self.threshold}")
        return shares

    def reconstruct(self, shares):
        """
        Reconstruct the secret from at least `threshold` shares.

        Raises:
            InsufficientSharesError: If fewer than `threshold` shares are given.
        """
        return reconstruct_secret(list(shares), self.threshold, self.prime)

    def reconstruct_batch(self, shares_list):
        """
        Reconstruct several secrets.

        Share sets whose first `threshold` x-coordinates match the previous set
        reuse its Lagrange coefficients.

        Args:
            shares_list: List of share lists.

        Returns:
            secrets: List of reconstructed secrets, in order.
        """
        if not shares_list:
            raise InvalidParameterError("Shares list cannot be empty")

        secrets = []
        xs = alphas = None
        for shares in shares_list:
            shares = list(shares)
            if len(shares) < self.threshold:
                raise InsufficientSharesError(
                    f"Not enough shares. Need {self.threshold}, got {len(shares)}")
            chosen = shares[:self.threshold]
            chosen_xs = [x for x, _ in chosen]
            if chosen_xs != xs:
                xs = chosen_xs
                alphas = compute_lagrange_coefficients(xs, self.prime)
            secrets.append(reconstruct(alphas, [y for _, y in chosen], self.prime))
        self.logger.debug(f"Reconstructed {len(secrets)} secrets")
        return secrets
