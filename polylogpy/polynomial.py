#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Created: 10-2026 - polylogpy developers

"""
Polynomial and Chebyshev-series evaluation kernels.

Coefficients are always given in ascending order, c[0] + c[1]*x + ...
The kernels work on any numeric scalar type and never change it, so the
precision of the result is the precision of ``x`` and of the coefficients.

"""


def horner(x, coeffs):
    """Evaluate sum(coeffs[k] * x**k) by Horner's rule."""
    p = coeffs[-1]
    for ck in reversed(coeffs[:-1]):
        p = p * x + ck
    return p


def estrin(x, coeffs):
    """Evaluate sum(coeffs[k] * x**k) in blocks of powers x, x^2, x^4, ...

    Adjacent terms are paired as (c0 + c1*x) + x^2*(c2 + c3*x) + ...,
    then the pairs are paired again with x^2, x^4 and so on. A trailing
    unpaired term at any level is carried up unchanged. For 23 coefficients
    this is

        (c0 + c1 x) + x^2 (c2 + c3 x) + x^4 (...) + x^8 (...) + x^16 (...)
    """
    terms = list(coeffs)
    power = x
    while len(terms) > 1:
        paired = [terms[k] + power * terms[k + 1]
                  for k in range(0, len(terms) - 1, 2)]
        if len(terms) % 2:
            paired.append(terms[-1])
        terms = paired
        power = power * power
    return terms[0]


def clenshaw(alpha, coeffs):
    """Backward recurrence b_k = c_k + alpha*b_{k+1} - b_{k+2}.

    Runs over all coefficients from the highest index down to 0 and
    returns the last two partial sums (b_0, b_1).
    """
    b1 = 0 * alpha
    b2 = 0 * alpha
    for ck in reversed(coeffs):
        b0 = ck + alpha * b1 - b2
        b2 = b1
        b1 = b0
    return b1, b2
