#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Created: 10-2026 - polylogpy developers

"""
Mathematical constants at double and long double precision.
The long double values are parsed from decimal strings so that no digit
goes through a binary64 intermediate.

"""

import numpy as np
from scipy.constants import pi

# double precision
pi2 = pi**2
pi2_3 = pi2 / 3
pi2_6 = pi2 / 6
pi2_12 = pi2 / 12
zeta3 = 1.2020569031595943

# reflection about pi, written as 2*pi = p0 + p1 with p0 exact in binary
p0 = 6.28125
p1 = 0.0019353071795864769253

# long double precision
pi_ld = np.longdouble('3.14159265358979323846264338327950288')
zeta3_ld = np.longdouble('1.2020569031595942853997381615114499908')
p0_ld = np.longdouble('6.28125')
p1_ld = np.longdouble('0.0019353071795864769252867665590057683943')

