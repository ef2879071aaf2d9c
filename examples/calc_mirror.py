# -*- coding: utf-8 -*-
"""Reflectivity of Si and Au mirrors at 1 deg grazing angle vs. energy.

The refractive index comes from the scattering factors of periodictable. If a
directory with Henke tables <symbol>.nff is given as the first argument, they
are used instead."""
__date__ = "19 Oct 2026"
import sys
import matplotlib.pyplot as plt
# path to xrmirror:
import os; sys.path.append(os.path.join('..'))  # analysis:ignore
import xrmirror as xm

model = xm.FormulaIndex(sys.argv[1]) if len(sys.argv) > 1 else None

fig, ax = plt.subplots()
legend = []
for symbol, rho, style in [('Si', 2.33, '-b'), ('Au', 19.32, ':r')]:
    legend = xm.plot_reflectivity(
        ax, xm.calculate(symbol, rho, [1000, 5000], 1, 's', adapter=model),
        style=style, legend=legend)
plt.show()
