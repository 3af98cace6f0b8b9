# -*- coding: utf-8 -*-
"""
    Sharing Parameters
    ~~~~~

    Defaults for the sharing session and the demo, with environment
    overrides.
"""

import os

from sss.errors import InvalidParameterError


def _env_int(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}") from e


# Bit length of the generated prime. The default matches the demo walkthrough
# and is far too small for real use.
BIT_STRENGTH = _env_int("SSS_BIT_STRENGTH", 14)

THRESHOLD = 3
NUM_SHARES = 4

# Participant x_i = ID_STEP * i for i in 1..n
ID_STEP = 2

# "entropy" or "time"
SEED_SOURCE = os.environ.get("SSS_SEED_SOURCE", "entropy")

# Bytes of entropy used to seed the GMP random state
SEED_BYTES = 32


def participant_ids(num_shares, step=ID_STEP):
    """
    Public x-coordinates for participants 1..num_shares.

    Args:
        num_shares (int): Number of participants.
        step (int): Spacing between consecutive identifiers, must be positive.

    Returns:
        list: [step, 2 * step, ..., num_shares * step]
    """
    if step < 1:
        raise InvalidParameterError(f"Identifier step must be positive, got {step}")
    return [step * i for i in range(1, num_shares + 1)]
