# -*- coding: utf-8 -*-
"""Reflectivity of an InSb mirror at 2 Å vs. grazing angle for s and p
polarizations, with the refractive index read from a 3-column table
E(eV), sigma, beta given as the first argument."""
__date__ = "19 Oct 2026"
import sys
import numpy as np
import matplotlib.pyplot as plt
# path to xrmirror:
import os; sys.path.append(os.path.join('..'))  # analysis:ignore
import xrmirror as xm

model = xm.TabulatedIndex.from_file(sys.argv[1])

theta = np.linspace(0, 2, 201)  # degrees
Rs = xm.xray_reflectivity('InSb', 5.7, xm.Wavelength(2), theta, 's',
                          adapter=model)
Rp = xm.xray_reflectivity('InSb', 5.7, xm.Wavelength(2), theta, 'p',
                          adapter=model)

plt.semilogy(theta, Rs, 'r', theta, Rp, 'b')
plt.xlabel('Grazing angle (deg)')
plt.ylabel('X-ray Reflectivity')
plt.show()
