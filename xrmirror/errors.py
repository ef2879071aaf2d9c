# -*- coding: utf-8 -*-
"""
Errors
------

Exceptions and warnings raised by :mod:`xrmirror`. All of them are raised
synchronously in the calling thread; nothing is retried since every
calculation is deterministic.
"""
__date__ = "19 Oct 2026"


class XrmirrorError(Exception):
    """Base class of the package exceptions."""


class InvalidInput(XrmirrorError, ValueError):
    """An empty, non-numeric or unphysical argument: non-positive density,
    energy or wavelength, an unknown polarization or an ambiguous pair of
    sweeps."""


class AdapterFailure(XrmirrorError, RuntimeError):
    """The refractive index model failed or returned an array that does not
    match the sweep axis."""


class NumericDomainWarning(RuntimeWarning):
    """The complex square root in the Fresnel formulas was taken exactly on
    its branch cut (the negative real axis). The principal value is used."""
