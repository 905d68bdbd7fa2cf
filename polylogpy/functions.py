#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Created: 10-2026 - polylogpy developers

"""
Scalar / array dispatch shared by the public functions.

"""

import numpy as np


def elementwise(kernel, x, otype):
    """Apply a scalar kernel to x.

    0-d input goes straight to the kernel and a numpy scalar comes back.
    Anything else is evaluated elementwise with numpy.vectorize and returns
    an array of dtype otype with the shape of x.
    """
    if np.ndim(x) == 0:
        return kernel(x)
    return np.vectorize(kernel, otypes=[otype])(x)
