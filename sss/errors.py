# -*- coding: utf-8 -*-
"""
    Secret Sharing Errors
    ~~~~~

    Exceptions raised by the field, polynomial and reconstruction modules.
"""


class SecretSharingError(Exception):
    pass


class GenerationError(SecretSharingError):
    """Prime or random generation failed."""


class InvalidParameterError(SecretSharingError, ValueError):
    """Threshold, share count, secret or modulus outside its valid range."""


class DuplicateOrZeroIdentifierError(InvalidParameterError):
    """x-coordinates are not pairwise distinct or include zero (mod p)."""


class InsufficientSharesError(SecretSharingError, ValueError):
    pass


class NonInvertibleElementError(SecretSharingError, ArithmeticError):
    """A modular inverse needed for Lagrange interpolation does not exist."""
