"""Basic CKKS encoder mapping complex vectors to polynomial coefficients."""

from __future__ import annotations

import cmath
import math
import operator
from itertools import accumulate, repeat
from typing import Optional

import numpy as np
from numpy.polynomial import Polynomial

from ckks.random import UniformRandomGenerator


def _complex_vector(values) -> np.ndarray:
    return np.asarray(values, dtype=complex).ravel()


def _real_vector(values) -> np.ndarray:
    return np.asarray(values, dtype=float).ravel()


class Encoder:
    """Encodes complex vectors into polynomials of degree below ``m / 2`` and back."""

    def __init__(
        self,
        m: int,
        scale: float,
        rng: Optional[UniformRandomGenerator] = None,
    ) -> None:
        n = m // 2
        if n < 1:
            raise ValueError("m must be at least 2")
        self.m = m
        self.n = n
        self.scale = float(scale)
        self.xi = cmath.exp(2.0 * math.pi * 1j / m)
        self.sigma_r_basis = self.create_sigma_r_basis(self.xi, n)
        self.sigma_r_basis_norms = (np.abs(self.sigma_r_basis) ** 2).sum(axis=1)
        self.vandermonde_t = self.vandermonde(self.xi, n).T
        self.rng = rng if rng is not None else UniformRandomGenerator()

    @staticmethod
    def create_sigma_r_basis(xi: complex, n: int) -> np.ndarray:
        """Return the basis of sigma(R) for the given root of unity."""
        return Encoder.vandermonde(xi, n)

    @staticmethod
    def vandermonde(xi: complex, n: int) -> np.ndarray:
        """Return the n x n matrix whose entry (j, i) is ``(xi ** (2i + 1)) ** j``."""
        columns = [
            list(accumulate(repeat(xi ** (2 * i + 1), n - 1), operator.mul, initial=1 + 0j))
            for i in range(n)
        ]
        return np.array(columns, dtype=complex).reshape(n, n).T

    def encode(self, z) -> np.ndarray:
        """Encode a vector of ``n / 2`` complex values into ``n`` coefficients."""
        pi_z = self.pi_inverse(z)
        scaled_pi_z = pi_z * self.scale
        rounded = self.sigma_r_discretization(scaled_pi_z)
        return self.sigma_inverse(rounded)

    def pi_inverse(self, z) -> np.ndarray:
        """Extend ``z`` with its conjugates in reverse order."""
        z = _complex_vector(z)
        return np.concatenate([z, z.conj()[::-1]])

    def sigma_r_discretization(self, z) -> np.ndarray:
        """Project ``z`` onto the sigma(R) lattice using random rounding."""
        coordinates = self.compute_basis_coordinates(z)
        rounded = self.coordinate_wise_random_rounding(coordinates)
        return self.sigma_r_basis.T @ rounded

    def compute_basis_coordinates(self, z) -> np.ndarray:
        """Return the real coordinates of ``z`` in the sigma(R) basis."""
        z = _complex_vector(z)
        return (self.sigma_r_basis @ z.conj()).real / self.sigma_r_basis_norms

    def coordinate_wise_random_rounding(self, coordinates) -> np.ndarray:
        """Shift each coordinate by 0 or -1, weighted by its fractional part."""
        coordinates = _real_vector(coordinates)
        fractional = self.round_coordinates(coordinates)
        shifts = [
            self.rng.weighted_choice([0.0, -1.0], [1.0 - f, f]) for f in fractional
        ]
        return (coordinates + np.array(shifts, dtype=float)).astype(complex)

    def round_coordinates(self, coordinates) -> np.ndarray:
        """Return the fractional part of each coordinate."""
        coordinates = _real_vector(coordinates)
        return coordinates - np.floor(coordinates)

    def sigma_inverse(self, b) -> np.ndarray:
        """Return the polynomial coefficients whose evaluations at the roots are ``b``."""
        return np.linalg.solve(self.vandermonde_t, _complex_vector(b))

    def decode(self, p) -> np.ndarray:
        """Decode ``n`` polynomial coefficients into ``n / 2`` complex values."""
        rescaled = _complex_vector(p) / self.scale
        return self.pi(self.sigma(rescaled))

    def pi(self, z) -> np.ndarray:
        """Keep the first half of ``z``."""
        z = _complex_vector(z)
        return z[: len(z) // 2].copy()

    def sigma(self, p) -> np.ndarray:
        """Evaluate the polynomial with coefficients ``p`` at the odd powers of xi."""
        poly = self.to_polynomial(p)
        return np.array(
            [poly(self.xi ** (2 * i + 1)) for i in range(self.n)], dtype=complex
        )

    def to_polynomial(self, x_coeffs) -> Polynomial:
        """Build a polynomial whose coefficient of ``X**k`` is ``x_coeffs[k]``."""
        return Polynomial(_complex_vector(x_coeffs))

    def from_polynomial(self, poly: Polynomial) -> np.ndarray:
        """Return the ``n`` coefficients of ``poly``, lowest degree first."""
        coeffs = np.asarray(poly.coef, dtype=complex)
        if len(coeffs) != self.n:
            raise ValueError(f"expected {self.n} coefficients, got {len(coeffs)}")
        return coeffs.copy()