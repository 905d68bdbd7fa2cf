#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Created: 10-2026 - polylogpy developers

"""
Dilogarithm, Clausen functions and the negative Dirichlet eta table,
evaluated to full double and long double precision.

"""

__version__ = '0.1.0'

from .li2 import li2, cli2, cli2_marshaled
from .clausen import Cl2, Cl3
from .eta import neg_eta
from .precision import DOUBLE, EXTENDED, tier_for

__all__ = ['li2', 'cli2', 'cli2_marshaled', 'Cl2', 'Cl3', 'neg_eta',
           'DOUBLE', 'EXTENDED', 'tier_for']
