# -*- coding: utf-8 -*-
"""
    Sharing Walkthrough
    ~~~~~

    Command line demo: generate a prime and a secret, split it among the
    participants and reconstruct it from the first k shares.
"""

import argparse
import logging
import sys

from sss import param
from sss.errors import SecretSharingError
from sss.field import RandomSource
from sss.lagrange import compute_lagrange_coefficients, reconstruct
from sss.polynomial import build_polynomial, compute_all_shares
from sss.scheme import ShamirSecretSharing

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Shamir secret sharing walkthrough")
    parser.add_argument("-n", "--num-shares", type=int, default=param.NUM_SHARES,
                        help=f"Number of participants (default: {param.NUM_SHARES})")
    parser.add_argument("-k", "--threshold", type=int, default=param.THRESHOLD,
                        help=f"Shares needed to reconstruct, must be <= participants (default: {param.THRESHOLD})")
    parser.add_argument("-b", "--bits", type=int, default=param.BIT_STRENGTH,
                        help=f"Bit strength of the prime (default: {param.BIT_STRENGTH})")
    parser.add_argument("-s", "--secret", type=int, default=None,
                        help="Secret to share (default: random in [0, p))")
    parser.add_argument("--step", type=int, default=param.ID_STEP,
                        help=f"Participant i gets x = step * i (default: {param.ID_STEP})")
    seeding = parser.add_mutually_exclusive_group()
    seeding.add_argument("--seed", type=int, default=None,
                         help="Seed the random source for a reproducible run")
    seeding.add_argument("--time-seed", action="store_true",
                         help="Seed from the wall clock (predictable, demo only)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    return parser.parse_args(argv)


def run(args):
    if args.seed is not None:
        rng = RandomSource(args.seed)
    elif args.time_seed:
        rng = RandomSource.from_time()
    else:
        rng = RandomSource.default()

    # Step 1: field prime, we work in Z/pZ
    scheme = ShamirSecretSharing(args.threshold, args.num_shares, bit_strength=args.bits,
                                 random_source=rng)
    p = scheme.prime
    logger.info(f"Random prime p = {p}")

    # Step 2: secret
    secret = args.secret if args.secret is not None else scheme.generate_secret()
    logger.info(f"Secret S = {secret}")

    # Step 3: random polynomial of degree k-1
    polynomial = build_polynomial(secret, scheme.threshold, p, rng)
    logger.debug(f"Polynomial P(X) = {polynomial.render()}")

    # Step 4: one share per participant
    xs = param.participant_ids(scheme.num_shares, args.step)
    shares = compute_all_shares(xs, polynomial, p)
    logger.info("Participant shares: " + ", ".join(f"(x={x}, y={y})" for x, y in shares))

    # Step 5: reconstruct from the first k participants
    chosen = shares[:scheme.threshold]
    alphas = compute_lagrange_coefficients([x for x, _ in chosen], p)
    logger.debug(f"Lagrange coefficients at 0: {alphas}")
    recovered = reconstruct(alphas, [y for _, y in chosen], p)
    logger.info(f"Reconstructed secret S = {recovered}")
    return recovered == secret


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        ok = run(args)
    except SecretSharingError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    if not ok:
        logger.error("Reconstructed secret does not match")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
