# -*- coding: utf-8 -*-
u"""
Units
-----

Conversion between x-ray energy and wavelength, :math:`\\lambda = hc/E`, and
the tagged spectral axes :class:`Energy` (eV) and :class:`Wavelength` (Å).

Historically, a bare number was taken as energy if it was greater than
:data:`ENERGY_THRESHOLD` and as wavelength in Å otherwise. The function
:func:`energy_or_wavelength` keeps this convention for old scripts. New code
should pass :class:`Energy` or :class:`Wavelength` explicitly::

    import xrmirror as xm
    R = xm.xray_reflectivity('Si', 2.33, xm.Energy([1000, 5000]), 1, 's')

"""
__date__ = "19 Oct 2026"

import numpy as np

from .errors import InvalidInput
from .physconsts import CH

ENERGY_THRESHOLD = 1.  # values above are eV, values below or equal are Å


def energy_to_wavelength(E):
    """Returns the wavelength in m of the photon energy *E* in eV. *E* can be
    an array."""
    return CH * 1e-10 / np.asarray(E, dtype=float)


def wavelength_to_energy(wavelength):
    """Returns the photon energy in eV of *wavelength* in m. *wavelength* can
    be an array."""
    return CH * 1e-10 / np.asarray(wavelength, dtype=float)


def to_samples(values, name='values'):
    """Converts *values* (a scalar or a sequence) to a 1D float array. Raises
    :class:`InvalidInput` for empty, non-numeric or non-finite input."""
    try:
        res = np.asarray(values, dtype=float).ravel()
    except (TypeError, ValueError) as e:
        raise InvalidInput(
            '{0} must be numeric, got {1!r}'.format(name, values)) from e
    if res.size == 0:
        raise InvalidInput('{0} is empty'.format(name))
    if not np.all(np.isfinite(res)):
        raise InvalidInput('{0} must be finite, got {1}'.format(name, res))
    return res


class SpectralAxis(object):
    """Base of the tagged spectral axes. *values* are kept in the units of the
    subclass; :attr:`energy` and :attr:`wavelength` give them in eV and m."""

    kind = None
    unit = ''

    def __init__(self, values):
        if isinstance(values, SpectralAxis):
            values = values.values
        values = to_samples(values, self.kind)
        if np.any(values <= 0):
            raise InvalidInput('{0} must be positive, got {1}'.format(
                self.kind, values[values <= 0]))
        self.values = values

    def __len__(self):
        return len(self.values)

    def __repr__(self):
        return '{0}({1})'.format(self.__class__.__name__, self.values)

    def with_values(self, values):
        """Returns a new axis of the same kind holding *values*."""
        return self.__class__(values)


class Energy(SpectralAxis):
    """Photon energy in eV."""

    kind = 'energy'
    unit = 'eV'

    @property
    def energy(self):
        return self.values

    @property
    def wavelength(self):
        return energy_to_wavelength(self.values)


class Wavelength(SpectralAxis):
    u"""Photon wavelength in Å."""

    kind = 'wavelength'
    unit = u'Å'

    @property
    def energy(self):
        return wavelength_to_energy(self.values * 1e-10)

    @property
    def wavelength(self):
        return self.values * 1e-10


def energy_or_wavelength(values, threshold=None):
    """Tags untyped *values* by magnitude: if the first sample is greater than
    *threshold* (default :data:`ENERGY_THRESHOLD`), all of them are energies
    in eV, otherwise wavelengths in Å. Already tagged axes are returned
    unchanged."""
    if isinstance(values, SpectralAxis):
        return values
    if threshold is None:
        threshold = ENERGY_THRESHOLD
    samples = to_samples(values, 'energyOrWavelength')
    if samples[0] > threshold:
        return Energy(samples)
    return Wavelength(samples)
