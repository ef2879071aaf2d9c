# -*- coding: utf-8 -*-
u"""
Sweeps
------

Normalization of the two input axes of a reflectivity calculation: the
spectral axis (energy or wavelength) and the grazing angle. Each one may be
given as

* a scalar -- a single sample;
* a two-element range ``[a, b]`` -- expanded to :data:`NPOINTS` equally
  spaced samples from *a* to *b* inclusive, or collapsed to *a* if ``a == b``;
* a longer sequence -- used verbatim.

Only one axis can be swept at a time. When the spectral axis has several
samples and the angle is also given as a sweep, the outcome is set by the
sweep policy:

``'strict'``
    raise :class:`~xrmirror.errors.InvalidInput`;

``'legacy'``
    take the first angle only, the behavior of earlier versions.

The module level :data:`NPOINTS` and :data:`SWEEP_POLICY` are the defaults
used when the corresponding keyword arguments are None.
"""
__date__ = "19 Oct 2026"

import logging
import numpy as np

from .errors import InvalidInput
from .units import SpectralAxis, energy_or_wavelength, to_samples

logger = logging.getLogger(__name__)

NPOINTS = 501  # number of samples in an expanded [a, b] range
SWEEP_POLICY = 'strict'
POLICIES = ('strict', 'legacy')


def expand_range(values, npoints=None, name='values'):
    """Returns a 1D array of samples of *values* by the scalar / range /
    verbatim rule described in the module docstring."""
    if npoints is None:
        npoints = NPOINTS
    if int(npoints) != npoints or npoints < 2:
        raise InvalidInput(
            'npoints must be an integer >= 2, got {0!r}'.format(npoints))
    samples = to_samples(values, name)
    if len(samples) == 2:
        if samples[0] == samples[1]:
            return samples[:1]
        return np.linspace(samples[0], samples[1], int(npoints))
    return samples


class Sweep(object):
    """Normalized inputs of one calculation.

    *spectral*: :class:`~xrmirror.units.SpectralAxis`
        Energy or wavelength samples.

    *theta*: array
        Grazing angle(s) in radians.

    *swept*: str or None
        'energy', 'wavelength', 'angle' or None for a single point.
    """

    def __init__(self, spectral, theta, swept):
        self.spectral = spectral
        self.theta = theta
        self.swept = swept

    @property
    def kind(self):
        return self.spectral.kind

    @property
    def thetaDeg(self):
        return np.degrees(self.theta)

    def __len__(self):
        return max(len(self.spectral), len(self.theta))

    def __repr__(self):
        return 'Sweep({0}, {1} angle(s), swept={2!r})'.format(
            self.spectral, len(self.theta), self.swept)


def normalize(energyOrWavelength, grazingAngle, npoints=None, policy=None,
              threshold=None):
    """Resolves the sweep axis and returns a :class:`Sweep`.

    *energyOrWavelength*: float, sequence or SpectralAxis
        Untagged values follow the magnitude convention of
        :func:`~xrmirror.units.energy_or_wavelength` with *threshold*.

    *grazingAngle*: float or sequence
        Angle from the mirror surface in degrees.

    *npoints*: int
        Number of samples of an expanded two-element range.

    *policy*: str
        'strict' or 'legacy', see the module docstring.
    """
    if policy is None:
        policy = SWEEP_POLICY
    if policy not in POLICIES:
        raise InvalidInput('policy must be one of {0}, got {1!r}'.format(
            POLICIES, policy))

    if isinstance(energyOrWavelength, SpectralAxis):
        spectral = energyOrWavelength.with_values(expand_range(
            energyOrWavelength.values, npoints, energyOrWavelength.kind))
    else:
        spectral = energy_or_wavelength(expand_range(
            energyOrWavelength, npoints, 'energyOrWavelength'), threshold)

    angles = to_samples(grazingAngle, 'grazingAngle')
    if len(spectral) > 1:
        if len(expand_range(angles, npoints, 'grazingAngle')) > 1:
            if policy == 'strict':
                raise InvalidInput(
                    'both {0} and grazing angle are swept; sweep one of them '
                    'or use policy="legacy"'.format(spectral.kind))
            logger.warning(
                'both %s and grazing angle are swept, only the first angle '
                '(%g deg) is used', spectral.kind, angles[0])
        theta = np.radians(angles[:1])
        swept = spectral.kind
    else:
        theta = np.radians(expand_range(angles, npoints, 'grazingAngle'))
        swept = 'angle' if len(theta) > 1 else None

    sweep = Sweep(spectral, theta, swept)
    logger.debug('normalized inputs: %r', sweep)
    return sweep
