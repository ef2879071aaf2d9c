# -*- coding: utf-8 -*-
u"""
Reflectivity
------------

Fresnel reflectivity of a thick, optically flat mirror in vacuum. The
grazing angle :math:`\\theta` is measured from the mirror surface, the Fresnel
formulas use the angle from the normal :math:`\\varphi = \\pi/2 - \\theta`:

.. math::

    r_s &= \\frac{\\cos\\varphi - \\sqrt{n^2 - \\sin^2\\varphi}}
    {\\cos\\varphi + \\sqrt{n^2 - \\sin^2\\varphi}}\\\\
    r_p &= \\frac{-n^2\\cos\\varphi + \\sqrt{n^2 - \\sin^2\\varphi}}
    {n^2\\cos\\varphi + \\sqrt{n^2 - \\sin^2\\varphi}}

and :math:`R = |r|^2`. The square root is the principal branch of
:func:`numpy.sqrt` on complex128, with the cut along the negative real axis
and the sign of a zero imaginary part respected. With :math:`\\beta > 0` the
radicand stays off the cut. It lies on the cut only for :math:`\\beta = 0`
below the critical angle (including :math:`\\theta = 0`); then
:class:`~xrmirror.errors.NumericDomainWarning` is issued and the principal
value is used, which gives :math:`R = 1` there. The result is not clipped to
[0, 1].

Example (reflectivity of a Si mirror at 1° vs. energy)::

    import xrmirror as xm
    R = xm.xray_reflectivity('Si', 2.33, [1000, 5000], 1, 's')

"""
__date__ = "19 Oct 2026"

import logging
import warnings
import numpy as np

from .errors import InvalidInput, AdapterFailure, NumericDomainWarning, \
    XrmirrorError
from .physconsts import PI
from .materials import get_adapter
from .sweep import normalize

logger = logging.getLogger(__name__)

POLARIZATIONS = {'s': 1, 'p': -1}


def check_polarization(polarization):
    """Returns +1 for s and -1 for p polarization. Accepts +1, -1, 's' and
    'p'."""
    if isinstance(polarization, str):
        pol = POLARIZATIONS.get(polarization.strip().lower())
        if pol is not None:
            return pol
    elif not isinstance(polarization, (bool, np.bool_)):
        try:
            if polarization in (1, -1):
                return int(polarization)
        except (TypeError, ValueError):
            pass
    raise InvalidInput(
        'polarization must be 1 (s) or -1 (p), got {0!r}'.format(polarization))


def check_density(rho):
    try:
        rho = float(rho)
    except (TypeError, ValueError) as e:
        raise InvalidInput(
            'density must be a number, got {0!r}'.format(rho)) from e
    if not np.isfinite(rho) or rho <= 0:
        raise InvalidInput('density must be positive, got {0}'.format(rho))
    return rho


def refractive_index(sigma, beta):
    return 1 - np.asarray(sigma, dtype=float) - 1j*np.asarray(beta, dtype=float)


def get_amplitude(n, theta, polarization):
    """Complex amplitude reflection coefficient for the refractive index *n*
    at the grazing angle *theta* (radians) and *polarization* (+1 = s,
    -1 = p). *n* and *theta* broadcast against each other."""
    pol = check_polarization(polarization)
    n = np.asarray(n, dtype=np.complex128)
    phi = PI/2 - np.asarray(theta, dtype=float)
    cosPhi = np.cos(phi)
    n2 = n**2
    radicand = n2 - np.sin(phi)**2
    if np.any((radicand.imag == 0) & (radicand.real < 0)):
        warnings.warn('square root taken on its branch cut, the principal '
                      'value is used', NumericDomainWarning, stacklevel=2)
    root = np.sqrt(radicand)
    if pol == 1:
        return (cosPhi - root) / (cosPhi + root)
    return (-n2*cosPhi + root) / (n2*cosPhi + root)


def get_reflectivity(n, theta, polarization):
    """Intensity reflectivity |r|² of :func:`get_amplitude`."""
    return np.abs(get_amplitude(n, theta, polarization))**2


class ReflectivityCurve(object):
    """The result of :func:`calculate`: the normalized sweep, the refractive
    index decrement per sample and the reflectivity *R*."""

    def __init__(self, symbol, rho, polarization, sweep, sigma, beta,
                 amplitude):
        self.symbol = symbol
        self.rho = rho
        self.polarization = polarization
        self.sweep = sweep
        self.sigma = sigma
        self.beta = beta
        self.amplitude = amplitude
        self.R = np.abs(amplitude)**2

    @property
    def n(self):
        return refractive_index(self.sigma, self.beta)

    @property
    def swept(self):
        return self.sweep.swept

    @property
    def x(self):
        """Abscissa of the curve: energy (eV) or wavelength (Å) for a spectral
        sweep, grazing angle (deg) otherwise."""
        if self.swept in ('energy', 'wavelength'):
            return self.sweep.spectral.values
        return self.sweep.thetaDeg

    def __len__(self):
        return len(self.R)


def call_adapter(adapter, symbol, rho, spectral):
    """Returns (sigma, beta) arrays from the refractive index model."""
    try:
        res = adapter(symbol, rho, spectral.values, spectral.kind)
    except XrmirrorError:
        raise
    except Exception as e:
        raise AdapterFailure('refractive index model failed for {0}: {1}'
                             .format(symbol, e)) from e
    try:
        res = np.asarray(res, dtype=float)
    except (TypeError, ValueError) as e:
        raise AdapterFailure(
            'refractive index model returned non-numeric data') from e
    if res.ndim == 1 and res.size == 2 and len(spectral) == 1:
        res = res.reshape(1, 2)
    if res.shape != (len(spectral), 2):
        raise AdapterFailure(
            'refractive index model returned shape {0}, expected {1}'.format(
                res.shape, (len(spectral), 2)))
    return res[:, 0], res[:, 1]


def calculate(symbol, rho, energyOrWavelength, grazingAngle, polarization,
              adapter=None, npoints=None, policy=None, threshold=None):
    r"""
    Calculates the reflectivity of a thick mirror and returns a
    :class:`ReflectivityCurve`.

    *symbol*: str
        Chemical formula of the mirror material, e.g. 'Si' or 'SiO2'.

    *rho*: float
        Density in g/cm³.

    *energyOrWavelength*: float, sequence or SpectralAxis
        X-ray energy in eV or wavelength in Å. Untagged values greater than
        1 are energies, otherwise wavelengths. A two-element sequence is a
        range, see :mod:`~xrmirror.sweep`.

    *grazingAngle*: float or sequence
        Angle of incidence relative to the surface in degrees.

    *polarization*: int or str
        1 or 's', -1 or 'p'.

    *adapter*: callable, complex or None
        Refractive index model, see :mod:`~xrmirror.materials`.

    *npoints*, *policy*, *threshold*:
        Range expansion, dual sweep policy and the energy/wavelength
        threshold of untagged values, see :func:`.sweep.normalize`.
    """
    rho = check_density(rho)
    pol = check_polarization(polarization)
    sweep = normalize(energyOrWavelength, grazingAngle, npoints, policy,
                      threshold)
    sigma, beta = call_adapter(get_adapter(adapter), symbol, rho,
                               sweep.spectral)
    amplitude = get_amplitude(refractive_index(sigma, beta), sweep.theta, pol)
    logger.debug('%s (%g g/cm3), %s polarization: %d samples swept over %s',
                 symbol, rho, 's' if pol == 1 else 'p', len(amplitude),
                 sweep.swept)
    return ReflectivityCurve(symbol, rho, pol, sweep, sigma, beta, amplitude)


def xray_reflectivity(symbol, rho, energyOrWavelength, grazingAngle,
                      polarization, ax=None, style='b', legend=None,
                      **kwargs):
    """
    Returns the array of reflectivity of a thick mirror, see
    :func:`calculate` for the parameters. If *ax* (a matplotlib Axes) is
    given, the curve is drawn into it with the matplotlib format string
    *style*; *legend* is the list of the legend labels already shown in *ax*.
    Reflectivity vs. energy (wavelength) is plotted if the spectral axis is
    swept, reflectivity vs. grazing angle otherwise.
    """
    curve = calculate(symbol, rho, energyOrWavelength, grazingAngle,
                      polarization, **kwargs)
    if ax is not None:
        from .plotter import plot_reflectivity
        plot_reflectivity(ax, curve, style=style, legend=legend)
    return curve.R
