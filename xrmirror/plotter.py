# -*- coding: utf-8 -*-
u"""
Plotter
-------

Drawing of :class:`~xrmirror.reflectivity.ReflectivityCurve` objects with
matplotlib. The functions here work on an explicitly given ``Axes`` and do not
touch the pyplot state machine, so several figures can be filled in any order.

.. tip::

    If you only want to save plots, e.g. on a remote machine, use a
    non-interactive matplotlib backend such as Agg or create the figure with
    :func:`new_axes`, which does not involve pyplot at all.

"""
__date__ = "19 Oct 2026"

import numpy as np
from matplotlib.figure import Figure

from .errors import InvalidInput

ANGSTROM = u'Å'


def new_axes(figsize=(8, 6), dpi=100):
    """Creates a standalone figure with one subplot, returns (fig, ax)."""
    fig = Figure(figsize=figsize, dpi=dpi)
    ax = fig.add_subplot(111)
    return fig, ax


def get_xlabel(curve):
    if curve.swept == 'energy':
        return 'Energy (keV)'
    elif curve.swept == 'wavelength':
        return u'Wavelength ({0})'.format(ANGSTROM)
    return 'Grazing angle (deg)'


def get_title(curve):
    sweep = curve.sweep
    if curve.swept in ('energy', 'wavelength'):
        return 'Grazing angle = {0:4.2f} deg'.format(sweep.thetaDeg[0])
    if sweep.kind == 'energy':
        return 'X-ray energy = {0:.0f} keV'.format(
            np.round(sweep.spectral.values[0] / 1000))
    return u'X-ray wavelength = {0:4.2f} {1}'.format(
        sweep.spectral.values[0], ANGSTROM)


def plot_reflectivity(ax, curve, style='b', legend=None):
    """
    Draws *curve* into *ax* and returns the updated list of legend labels.

    A spectral sweep is drawn with a linear y axis vs. energy in keV or
    wavelength in Å; an angular sweep (or a single point) is drawn with a
    logarithmic y axis vs. grazing angle in degrees.

    *style*: str
        matplotlib format string, e.g. '-b' or ':r'.

    *legend*: list of str or None
        Labels of the curves already drawn in *ax*, one per labelled line.
        If None, they are taken from the labelled lines of *ax*.
    """
    drawn = [line.get_label() for line in ax.get_lines()
             if not line.get_label().startswith('_')]
    if legend is None:
        legend = drawn
    elif len(legend) != len(drawn):
        raise InvalidInput(
            'legend has {0} label(s) but the axes show {1} curve(s)'.format(
                len(legend), len(drawn)))
    labels = list(legend) + [curve.symbol]

    if curve.swept == 'energy':
        line, = ax.plot(curve.x / 1000, curve.R, style)
    elif curve.swept == 'wavelength':
        line, = ax.plot(curve.x, curve.R, style)
    else:
        line, = ax.semilogy(curve.x, curve.R, style)
    line.set_label(curve.symbol)

    ax.set_xlabel(get_xlabel(curve))
    ax.set_ylabel('X-ray Reflectivity')
    ax.set_title(get_title(curve))
    handles = [h for h in ax.get_lines()
               if not h.get_label().startswith('_')]
    ax.legend(handles, labels)
    return labels
