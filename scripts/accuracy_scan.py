#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Created: 10-2026 - polylogpy developers

"""
Scan the error of li2, Cl2 and Cl3 against mpmath, in units of the
last place of each precision tier.

"""
import numpy as np
import matplotlib.pyplot as plt

import concurrent.futures
from tqdm import tqdm

import mpmath as mp

from polylogpy import li2, Cl2, Cl3

mp.mp.dps = 40

npoints = 2000

x = np.linspace(-10, 10, npoints)
theta = np.linspace(-2 * np.pi, 2 * np.pi, npoints)
theta_ld = np.linspace(np.longdouble(-2) * np.pi, np.longdouble(2) * np.pi, npoints)

scans = {
    'li2': (li2, x, lambda t: mp.polylog(2, t).real),
    'Cl2': (Cl2, theta, lambda t: mp.clsin(2, t)),
    'Cl3': (Cl3, theta, lambda t: mp.clcos(3, t)),
    'Cl2_ld': (Cl2, theta_ld, lambda t: mp.clsin(2, t)),
    'Cl3_ld': (Cl3, theta_ld, lambda t: mp.clcos(3, t)),
}


def ulp_error(name):
    func, args, reference = scans[name]
    values = func(args)
    eps = np.finfo(values.dtype).eps
    exact = np.array([values.dtype.type(mp.nstr(reference(mp.mpf(str(a))), 30))
                      for a in args])
    scale = np.maximum(np.abs(exact), np.finfo(values.dtype).tiny)
    return name, np.abs(values - exact) / scale / eps


errors = {}
with concurrent.futures.ProcessPoolExecutor(max_workers=4) as executor:
    for name, err in tqdm(executor.map(ulp_error, scans), total=len(scans)):
        errors[name] = err
        print('{:8s} max error {:6.2f} ulp'.format(name, np.nanmax(err)))


np.savez_compressed('accuracy_scan.npz', x=x, theta=theta, **errors)


fig, axes = plt.subplots(1, 2, figsize=(10, 4))
axes[0].plot(x, errors['li2'], '.', ms=2, label='li2')
axes[0].set_xlabel('x')
for name in ('Cl2', 'Cl3', 'Cl2_ld', 'Cl3_ld'):
    axes[1].plot(theta, errors[name], '.', ms=2, label=name)
axes[1].set_xlabel('theta')
for ax in axes:
    ax.set_ylabel('error [ulp]')
    ax.legend()
plt.show()
