#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Created: 10-2026 - polylogpy developers

"""
Real and complex dilogarithm Li2.

The real function is a truncated Chebyshev expansion (CERNLIB DILOG, C332;
Y. L. Luke, Mathematical functions and their approximations, 1975, p. 67)
after mapping x onto [0, 1] with the reflection and inversion identities.
The complex function maps z into the unit disk with Re(z) <= 1/2 and sums
the Bernoulli series of Li2 in -log(1 - z).

"""

from collections import namedtuple

import numpy as np

from .constants import pi, pi2_3, pi2_6, pi2_12
from .functions import elementwise
from .polynomial import clenshaw, horner

# Chebyshev coefficients of Li2 on [0, 1]
C = (0.42996693560813697, 0.40975987533077106,
     -0.01858843665014592, 0.00145751084062268, -0.00014304184442340,
     0.00001588415541880, -0.00000190784959387, 0.00000024195180854,
     -0.00000003193341274, 0.00000000434545063, -0.00000000060578480,
     0.00000000008612098, -0.00000000001244332, 0.00000000000182256,
     -0.00000000000027007, 0.00000000000004042, -0.00000000000000610,
     0.00000000000000093, -0.00000000000000014, 0.00000000000000002)

# B_{2n} / (2n + 1)!, n = 1..9, preceded by the -1/4 of the linear term
BF = (-1.0 / 4.0,
      +1.0 / 36.0,
      -1.0 / 3600.0,
      +1.0 / 211680.0,
      -1.0 / 10886400.0,
      +1.0 / 526901760.0,
      -4.064761645144226e-11,
      +8.921691020456453e-13,
      -1.993929586072108e-14,
      +4.518980029619918e-16)

DBL_EPSILON = np.finfo(np.float64).eps

Li2Reduction = namedtuple('Li2Reduction', ['y', 'sign', 'correction'])
Cli2Reduction = namedtuple('Cli2Reduction', ['cz', 'cy', 'sign', 'ipi12'])


def reduce_li2(x):
    """Map x onto the Chebyshev interval of the Li2 series.

    Returns Li2Reduction(y, sign, correction) with 0 <= y <= 1 such that
    Li2(x) = -(sign * S(y) + correction), S being the Chebyshev sum.
    Not valid at x = 1 and x = -1, which li2 handles separately.
    """
    t = -x
    if t <= -2:
        b1 = np.log(-t)
        b2 = np.log(1 + 1 / t)
        return Li2Reduction(-1 / (1 + t), 1, -pi2_3 + 0.5 * (b1 * b1 - b2 * b2))
    elif t < -1:
        a = np.log(-t)
        return Li2Reduction(-1 - t, -1, -pi2_6 + a * (a + np.log(1 + 1 / t)))
    elif t <= -0.5:
        a = np.log(-t)
        return Li2Reduction(-(1 + t) / t, 1, -pi2_6 + a * (-0.5 * a + np.log(1 + t)))
    elif t < 0:
        b1 = np.log(1 + t)
        return Li2Reduction(-t / (1 + t), -1, 0.5 * b1 * b1)
    elif t <= 1:
        return Li2Reduction(t, 1, 0.0)
    else:
        b1 = np.log(t)
        return Li2Reduction(1 / t, -1, pi2_6 + 0.5 * b1 * b1)


def _li2(x):
    x = np.float64(x)
    if x == 1:
        return np.float64(pi2_6)
    if x == -1:
        return np.float64(-pi2_12)

    y, sign, correction = reduce_li2(x)
    h = y + y - 1
    b1, b2 = clenshaw(h + h, C)
    return -(sign * (b1 - h * b2) + correction)


def li2(x):
    """Real dilogarithm Li2(x) for real x.

    Args:
        x : real scalar or array

    Returns:
        Li2(x) as numpy.float64 (array of float64 for array input).
        For x > 1 this is the real part of the analytic continuation.
    """
    return elementwise(_li2, x, np.float64)


def reduce_cli2(z):
    """Map z into the convergence disk of the Bernoulli series.

    Returns Cli2Reduction(cz, cy, sign, ipi12) such that
    Li2(z) = sign * B(cz) + cy + ipi12 * pi^2 / 12, B being the series.
    """
    rz, nz = z.real, z.real**2 + z.imag**2

    if rz <= 0.5 and nz <= 1:
        return Cli2Reduction(-np.log(1 - z), 0j, 1, 0)
    if rz > 0.5 and nz <= 2 * rz:
        cz = -np.log(z)
        return Cli2Reduction(cz, cz * np.log(1 - z), -1, 2)
    lz = np.log(-z)
    return Cli2Reduction(-np.log(1 - 1 / z), -0.5 * lz * lz, -1, -2)


def _cli2(z):
    z = np.complex128(z)
    rz, iz = z.real, z.imag

    if iz == 0:
        if rz <= 1:
            return np.complex128(complex(_li2(rz), 0.0))
        return np.complex128(complex(_li2(rz), -pi * np.log(rz)))
    if rz * rz + iz * iz < DBL_EPSILON:
        return z

    cz, cy, sign, ipi12 = reduce_cli2(z)
    cz2 = cz * cz
    series = cz + cz2 * (BF[0] + cz * horner(cz2, BF[1:]))

    return sign * series + cy + ipi12 * pi2_12


def cli2(z):
    """Complex dilogarithm Li2(z).

    On the real axis this agrees with li2, with imaginary part
    -pi*log(x) for x > 1 (the branch cut is approached from below).
    """
    return elementwise(_cli2, z, np.complex128)


def cli2_marshaled(re, im, out):
    """cli2 on separate real and imaginary parts.

    Writes Re(Li2(re + i*im)) to out[0] and Im(...) to out[1].
    """
    result = _cli2(complex(re, im))
    out[0] = result.real
    out[1] = result.imag
