# ckks

The encoding step of the CKKS homomorphic encryption scheme. A vector of
complex numbers is turned into the coefficients of a polynomial of degree
below `N`, and back again, using the canonical embedding for the cyclotomic
polynomial `X^N + 1`. Values are held in NumPy arrays.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
import numpy as np

from ckks.encoder import Encoder

# M = 8, so polynomials have N = M / 2 = 4 coefficients
# and a message holds N / 2 = 2 complex slots.
encoder = Encoder(8, 64.0)

message = np.array([3 + 4j, 2 - 1j])
encoded = encoder.encode(message)   # 4 polynomial coefficients
decoded = encoder.decode(encoded)   # close to the original message
```

`Encoder(m, scale, rng=None)` raises `ValueError` when `m` is below 2.

`encode` runs the full pipeline:

1. `pi_inverse` extends the message with its conjugate in reverse order, so
   the vector lies in the image of the canonical embedding.
2. The vector is multiplied by the scale.
3. `sigma_r_discretization` projects it onto the lattice basis
   (`compute_basis_coordinates`), rounds each coordinate down or up at
   random, weighted by its fractional part (`round_coordinates`,
   `coordinate_wise_random_rounding`), and maps the result back.
4. `sigma_inverse` solves for the polynomial coefficients. They come back as
   a complex array whose values lie close to integers.

`decode` reverses it: it divides by the scale, evaluates the polynomial at
the odd powers of the primitive `M`-th root of unity (`sigma`) and keeps the
first half of the values (`pi`).

The rounding is random. To make it repeatable, pass a seeded generator:

```python
from ckks.random import UniformRandomGenerator

encoder = Encoder(8, 64.0, UniformRandomGenerator(seed=1))
```

`UniformRandomGenerator.weighted_choice(choices, weights)` picks one of the
choices, each with a probability in proportion to its weight. It raises
`ValueError` when the weights are empty, negative, not finite, all zero, or
more numerous than the choices.

The basis helpers `Encoder.vandermonde(xi, n)` and
`Encoder.create_sigma_r_basis(xi, n)` can be called on the class itself.
`to_polynomial` turns a coefficient vector, lowest degree first, into a
`numpy.polynomial.Polynomial`; `from_polynomial` turns it back and raises
`ValueError` unless the polynomial has exactly `N` coefficients.

## What it does not do

The package only encodes and decodes plaintexts. It has no key generation,
no encryption or decryption, no ciphertext arithmetic and no command-line
tool.