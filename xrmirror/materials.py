# -*- coding: utf-8 -*-
u"""
Materials
---------

Module :mod:`~xrmirror.materials` provides the complex refractive index
:math:`n = 1 - \\sigma - i\\beta` of a mirror material for the reflectivity
calculation in :mod:`~xrmirror.reflectivity`.

A refractive index model (an *adapter*) is any callable of the signature::

    adapter(symbol, rho, samples, kind) -> array of shape (len(samples), 2)

where *symbol* is the chemical formula, *rho* is the density in g/cm³,
*samples* are the spectral samples in eV (*kind* = 'energy') or in Å
(*kind* = 'wavelength') and the two returned columns are :math:`\\sigma` and
:math:`\\beta`, one row per sample in the same order.

By default (``adapter=None``) the index is taken from the x-ray scattering
factors of :mod:`periodictable`, see :class:`PeriodicTableIndex`.
:class:`FormulaIndex` does the same calculation from user supplied Henke
tables.

.. autoclass:: RefractiveIndex()
   :members: __call__, get_refractive_index, get_absorption_coefficient
.. autoclass:: PeriodicTableIndex()
   :members: get_refractive_index
.. autoclass:: FormulaIndex()
   :members: __init__, get_refractive_index
.. autoclass:: TabulatedIndex()
   :members: __init__, from_file
.. autoclass:: ConstantIndex()
   :members: __init__
.. autofunction:: get_adapter
"""
__date__ = "19 Oct 2026"

import os
import re
import logging
import numpy as np
from scipy.interpolate import interp1d
import periodictable as pt
import periodictable.xsf as xsf

from .errors import InvalidInput, AdapterFailure
from .physconsts import PI2, CH, CHBAR, R0, AVOGADRO
from .units import wavelength_to_energy

logger = logging.getLogger(__name__)

dataDir = os.path.join(os.path.dirname(__file__), 'data')
f1f2Dir = os.path.join(dataDir, 'f1f2')

elementsList = (
    'none', 'H', 'He', 'Li', 'Be', 'B', 'C', 'N', 'O', 'F', 'Ne',
    'Na', 'Mg', 'Al', 'Si', 'P', 'S', 'Cl', 'Ar', 'K', 'Ca', 'Sc', 'Ti', 'V',
    'Cr', 'Mn', 'Fe', 'Co', 'Ni', 'Cu', 'Zn', 'Ga', 'Ge', 'As', 'Se', 'Br',
    'Kr', 'Rb', 'Sr', 'Y', 'Zr', 'Nb', 'Mo', 'Tc', 'Ru', 'Rh', 'Pd', 'Ag',
    'Cd', 'In', 'Sn', 'Sb', 'Te', 'I', 'Xe', 'Cs', 'Ba', 'La', 'Ce', 'Pr',
    'Nd', 'Pm', 'Sm', 'Eu', 'Gd', 'Tb', 'Dy', 'Ho', 'Er', 'Tm', 'Yb', 'Lu',
    'Hf', 'Ta', 'W', 'Re', 'Os', 'Ir', 'Pt', 'Au', 'Hg', 'Tl', 'Pb', 'Bi',
    'Po', 'At', 'Rn', 'Fr', 'Ra', 'Ac', 'Th', 'Pa', 'U')

spl_kw = {'kind': 'cubic', 'bounds_error': True}

_formulaToken = re.compile(r'([A-Z][a-z]?)(\d+(?:\.\d*)?|\.\d+)?')


def read_atomic_masses():
    masses = {}
    with open(os.path.join(dataDir, 'AtomicMasses.dat')) as f:
        for li in f:
            if li.startswith('#') or not li.strip():
                continue
            fields = li.split()
            masses[fields[1]] = float(fields[2])
    return masses


atomicMasses = read_atomic_masses()


def parse_formula(formula):
    """Splits a chemical formula like 'SiO2' or 'Al2O3' into the lists of
    element symbols and their quantities. Repeated elements are summed.
    Groups in parentheses are not supported."""
    if not isinstance(formula, str) or not formula.strip():
        raise InvalidInput(
            'chemical formula must be a non-empty string, got {0!r}'.format(
                formula))
    formula = formula.strip()
    elements, quantities = [], []
    pos = 0
    for m in _formulaToken.finditer(formula):
        if m.start() != pos:
            break
        pos = m.end()
        elem = m.group(1)
        if elem not in elementsList[1:]:
            raise InvalidInput('unknown chemical element {0!r} in {1!r}'.format(
                elem, formula))
        xi = float(m.group(2)) if m.group(2) else 1.
        if xi <= 0:
            raise InvalidInput('zero quantity of {0} in {1!r}'.format(
                elem, formula))
        if elem in elements:
            quantities[elements.index(elem)] += xi
        else:
            elements.append(elem)
            quantities.append(xi)
    if pos != len(formula):
        raise InvalidInput('cannot parse chemical formula {0!r}'.format(
            formula))
    return elements, quantities


class Element(object):
    """Atomic scattering factors f1 and f2 of a chemical element, read from a
    Henke table ``<symbol>.nff`` in *dataDir*."""

    def __init__(self, elem, dataDir=None):
        if elem not in elementsList[1:]:
            raise InvalidInput('wrong chemical element {0!r}'.format(elem))
        self.name = elem
        self.Z = elementsList.index(elem)
        self.mass = atomicMasses[elem]
        self.dataDir = f1f2Dir if dataDir is None else dataDir
        self.E, self.f1, self.f2 = self.read_f1f2_vs_E()

    def read_f1f2_vs_E(self):
        """Reads f1 and f2 scattering factors at the instantiation time."""
        pname = os.path.join(self.dataDir, self.name.lower() + '.nff')
        if not os.path.exists(pname):
            raise AdapterFailure(
                'no scattering factor table for {0}: {1} not found'.format(
                    self.name, pname))
        logger.info('reading scattering factors of %s from %s',
                    self.name, pname)
        E, f1, f2 = np.loadtxt(pname, skiprows=1, unpack=True, ndmin=2)
        good = f1 > -9999
        return E[good], f1[good], f2[good]

    def get_f1f2(self, E):
        """Interpolates f1 + i*f2 for the given *E*, a scalar or an array."""
        outside = (E < self.E[0]) | (E > self.E[-1])
        if np.any(outside):
            raise AdapterFailure(
                ('E={0} is out of the data table range of {1} ' +
                 '[{2}, {3}]').format(
                    np.atleast_1d(E)[np.atleast_1d(outside)],
                    self.name, self.E[0], self.E[-1]))
        f1 = np.interp(E, self.E, self.f1)
        f2 = np.interp(E, self.E, self.f2)
        return f1 + 1j*f2


class RefractiveIndex(object):
    """Base class of the refractive index models. Subclasses implement
    :meth:`get_refractive_index` for energies in eV."""

    def __call__(self, symbol, rho, samples, kind='energy'):
        """Returns an array of shape (N, 2) of (sigma, beta) for the N
        *samples* given in eV (*kind* = 'energy') or Å (*kind* =
        'wavelength')."""
        E = np.asarray(samples, dtype=float).ravel()
        if kind == 'wavelength':
            E = wavelength_to_energy(E * 1e-10)
        elif kind != 'energy':
            raise InvalidInput('unknown spectral kind {0!r}'.format(kind))
        decrement = 1 - np.broadcast_to(
            self.get_refractive_index(symbol, rho, E), E.shape)
        return np.column_stack((decrement.real, decrement.imag))

    def get_refractive_index(self, symbol, rho, E):
        raise NotImplementedError

    def get_absorption_coefficient(self, symbol, rho, E):  # mu0
        r"""
        Calculates the linear absorption coefficient from the imaginary part of
        refractive index. *E* can be an array. The result is in cm\ :sup:`-1`.

        .. math::

            \mu = 2 \Im(n) k.
        """
        E = np.asarray(E, dtype=float)
        n = self.get_refractive_index(symbol, rho, E)
        return abs(np.imag(n)) * E / CHBAR * 2e8


class FormulaIndex(RefractiveIndex):
    """Refractive index of a material given by its chemical formula and
    density, calculated from Henke atomic scattering factor tables supplied
    by the user."""

    def __init__(self, dataDir=None):
        """
        *dataDir*: str
            Directory with the Henke tables ``<symbol>.nff``. Defaults to
            ``xrmirror/data/f1f2``.
        """
        self.dataDir = f1f2Dir if dataDir is None else dataDir
        self._elements = {}

    def get_element(self, elem):
        if elem not in self._elements:
            self._elements[elem] = Element(elem, self.dataDir)
        return self._elements[elem]

    def get_refractive_index(self, symbol, rho, E):
        r"""
        Calculates refractive index at given *E*. *E* can be an array.

        .. math::

            n = 1 - \frac{r_0\lambda^2 N_A \rho}{2\pi M}\sum_i{x_i f_i(0)}

        where :math:`r_0` is the classical electron radius, :math:`\lambda` is
        the wavelength, :math:`N_A` is Avogadro’s number, :math:`\rho` is the
        material density, *M* is molar mass, :math:`x_i` are atomic
        concentrations (coefficients in the chemical formula) and
        :math:`f_i(0) = f_1 + if_2` are the complex atomic scattering factors
        for the forward scattering.
        """
        E = np.asarray(E, dtype=float)
        xf = np.zeros_like(E) * 0j
        mass = 0.
        for elem, xi in zip(*parse_formula(symbol)):
            element = self.get_element(elem)
            xf += element.get_f1f2(E) * xi
            mass += element.mass * xi
        return 1 - 1e-24 * AVOGADRO * R0 / PI2 * (CH/E)**2 * rho * \
            xf / mass  # 1e-24 = A^3/cm^3


class TabulatedIndex(RefractiveIndex):
    """Refractive index interpolated in a table of (E, sigma, beta). The
    material symbol and density are not used."""

    def __init__(self, E, sigma, beta):
        """
        *E*, *sigma*, *beta*: 1D arrays of equal length
            Energy in eV (ascending) and the two parts of the refractive
            index decrement. Cubic interpolation is used for four or more
            points, linear otherwise.
        """
        msg = 'E, sigma and beta must be 1D arrays of equal length >= 2'
        try:
            E = np.asarray(E, dtype=float)
            sigmaBeta = np.array([sigma, beta], dtype=float)
        except (TypeError, ValueError) as e:
            raise InvalidInput(msg) from e
        if E.ndim != 1 or sigmaBeta.shape != (2, len(E)) or len(E) < 2:
            raise InvalidInput(msg)
        kw = dict(spl_kw)
        if len(E) < 4:
            kw['kind'] = 'linear'
        self.E = E
        self.interpolator = interp1d(E, sigmaBeta, axis=-1, **kw)

    @classmethod
    def from_file(cls, fname):
        """Reads a 3-column table E(eV), sigma, beta. Comma or whitespace
        separated; lines that do not start with a number are skipped."""
        E, sigma, beta = [], [], []
        with open(fname) as f:
            for li in f:
                fields = li.replace(',', ' ').split()
                try:
                    row = [float(x) for x in fields[:3]]
                except ValueError:
                    continue
                if len(row) < 3:
                    continue
                E.append(row[0])
                sigma.append(row[1])
                beta.append(row[2])
        return cls(E, sigma, beta)

    def get_refractive_index(self, symbol, rho, E):
        E = np.asarray(E, dtype=float)
        if np.min(E) < self.E[0] or np.max(E) > self.E[-1]:
            raise AdapterFailure(
                'Cannot calculate refractive index. Energy outside of the '
                'range [{0}, {1}]'.format(self.E[0], self.E[-1]))
        sigma, beta = self.interpolator(E)
        return 1 - sigma - 1j*beta


class ConstantIndex(RefractiveIndex):
    """Energy independent refractive index n = 1 - sigma - i*beta."""

    def __init__(self, sigma=0., beta=0.):
        self.refractiveIndex = complex(1 - sigma, -beta)

    def get_refractive_index(self, symbol, rho, E):
        return np.full(np.shape(E), self.refractiveIndex)


class PeriodicTableIndex(RefractiveIndex):
    """Refractive index of a material given by its chemical formula and
    density, from the x-ray scattering factors bundled with
    :mod:`periodictable`. This is the default model."""

    def __init__(self):
        self._formulas = {}

    def get_formula(self, symbol):
        if not isinstance(symbol, str) or not symbol.strip():
            raise InvalidInput(
                'chemical formula must be a non-empty string, '
                'got {0!r}'.format(symbol))
        if symbol not in self._formulas:
            try:
                self._formulas[symbol] = pt.formula(symbol)
            except (ValueError, TypeError, KeyError) as e:
                raise InvalidInput(
                    'cannot parse chemical formula {0!r}'.format(symbol)) from e
        return self._formulas[symbol]

    def get_refractive_index(self, symbol, rho, E):
        """Calculates refractive index at given *E* in eV. *E* can be an
        array. Energies outside the scattering factor tables raise
        :class:`~xrmirror.errors.AdapterFailure`."""
        E = np.asarray(E, dtype=float)
        n = xsf.index_of_refraction(
            self.get_formula(symbol), density=rho, energy=E*1e-3)
        n = np.asarray(n, dtype=complex)
        bad = np.isnan(n)
        if np.any(bad):
            raise AdapterFailure(
                'no scattering factors of {0} at E={1}'.format(
                    symbol, np.atleast_1d(E)[np.atleast_1d(bad)]))
        return n


defaultAdapter = PeriodicTableIndex()


def get_adapter(adapter=None):
    """Resolves the refractive index model: None gives the shared
    :data:`defaultAdapter` (a :class:`PeriodicTableIndex`), a complex or float
    number gives :class:`ConstantIndex` for n = *adapter*, a callable is
    returned as is."""
    if adapter is None:
        return defaultAdapter
    if isinstance(adapter, (complex, float)):
        n = complex(adapter)
        return ConstantIndex(1 - n.real, -n.imag)
    if callable(adapter):
        return adapter
    raise InvalidInput(
        'refractive index model must be callable, got {0!r}'.format(adapter))
