# -*- coding: utf-8 -*-
u"""Package xrmirror calculates the specular reflectivity of a thick, optically
flat x-ray mirror vs. x-ray energy (wavelength) at a fixed grazing angle or vs.
grazing angle at a fixed energy (wavelength), for s and p polarizations. It
is meant for selecting mirror coatings and incidence angles of x-ray optics.

.. code-block:: python

    import xrmirror as xm

    fig, ax = xm.new_axes()
    legend = []
    for symbol, rho, style in [('Si', 2.33, '-b'), ('Au', 19.32, ':r')]:
        R = xm.xray_reflectivity(symbol, rho, [1000, 5000], 1, 's', ax=ax,
                                 style=style, legend=legend)
        legend.append(symbol)
    fig.savefig('mirrors.png')

Modules
-------

:mod:`~xrmirror.units`
    energy/wavelength conversion and the tagged axes :class:`Energy` and
    :class:`Wavelength`;
:mod:`~xrmirror.sweep`
    normalization of scalar/range/vector inputs into one sweep axis;
:mod:`~xrmirror.materials`
    refractive index models;
:mod:`~xrmirror.reflectivity`
    the Fresnel formulas and the entry points :func:`xray_reflectivity` and
    :func:`calculate`;
:mod:`~xrmirror.plotter`
    matplotlib presentation.
"""
__date__ = "19 Oct 2026"

from .version import __version__  # analysis:ignore
from .errors import (  # analysis:ignore
    XrmirrorError, InvalidInput, AdapterFailure, NumericDomainWarning)
from .units import (  # analysis:ignore
    Energy, Wavelength, energy_or_wavelength, energy_to_wavelength,
    wavelength_to_energy)
from .sweep import NPOINTS, Sweep, expand_range, normalize  # analysis:ignore
from .materials import (  # analysis:ignore
    RefractiveIndex, PeriodicTableIndex, FormulaIndex, TabulatedIndex,
    ConstantIndex, get_adapter)
from .reflectivity import (  # analysis:ignore
    ReflectivityCurve, calculate, get_amplitude, get_reflectivity,
    xray_reflectivity)
from .plotter import new_axes, plot_reflectivity  # analysis:ignore
