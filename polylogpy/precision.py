#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Created: 10-2026 - polylogpy developers

"""
Precision tiers.

A tier bundles the floating point type of one evaluation with the constants
carried to that precision. Every intermediate of a call uses a single tier:
the argument is cast to ``tier.dtype`` on entry and all constants are taken
from the tier record.

"""

import logging
from collections import namedtuple

import numpy as np

from . import constants as c

log = logging.getLogger(__name__)

Tier = namedtuple('Tier', ['name', 'dtype', 'eps', 'pi', 'pi2', 'pih', 'pi28',
                           'zeta3', 'p0', 'p1'])


def _make_tier(name, dtype, pi, zeta3, p0, p1):
    pi = dtype(pi)
    return Tier(name=name, dtype=dtype, eps=np.finfo(dtype).eps,
                pi=pi, pi2=2 * pi, pih=pi / 2, pi28=pi * pi / 8,
                zeta3=dtype(zeta3), p0=dtype(p0), p1=dtype(p1))


DOUBLE = _make_tier('double', np.float64, c.pi, c.zeta3, c.p0, c.p1)
EXTENDED = _make_tier('extended', np.longdouble, c.pi_ld, c.zeta3_ld,
                      c.p0_ld, c.p1_ld)

if EXTENDED.eps >= DOUBLE.eps:
    log.debug('numpy.longdouble is binary64 on this platform: '
              'the extended tier has double precision')


def tier_for(x):
    """Select the precision tier of a real argument from its dtype.

    longdouble scalars and arrays get the extended tier, every other real
    type (python floats and ints, float16/32/64, integer arrays) the double
    tier.

    Raises:
        TypeError: for complex or non-numeric arguments
    """
    dtype = np.asarray(x).dtype
    if dtype == np.longdouble:
        return EXTENDED
    if not (np.issubdtype(dtype, np.floating) or
            np.issubdtype(dtype, np.integer) or dtype == np.bool_):
        raise TypeError("Clausen functions are defined for real angles only, "
                        "got dtype {}".format(dtype))
    return DOUBLE
