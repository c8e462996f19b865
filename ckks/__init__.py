"""Encoding of complex vectors into CKKS plaintext polynomials and back."""

__version__ = "0.1.0"
__all__ = ["encoder", "random"]