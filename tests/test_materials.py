# -*- coding: utf-8 -*-
import numpy as np
import pytest

import xrmirror as xm
from xrmirror.materials import Element, parse_formula, atomicMasses
from xrmirror.physconsts import PI2, CH, CHBAR, R0, AVOGADRO

F1_SI, F2_SI = 14.3, 0.4
F1_O, F2_O = 8.05, 0.03


def write_nff(path, f1, f2, E=(1000., 4000., 8000., 20000.)):
    with open(str(path), 'w') as f:
        f.write('E(eV)\tf1\tf2\n')
        f.write('{0}\t-9999.\t{1}\n'.format(E[0] / 2, f2))
        for e in E:
            f.write('{0}\t{1}\t{2}\n'.format(e, f1, f2))


@pytest.fixture
def f1f2dir(tmp_path):
    write_nff(tmp_path / 'si.nff', F1_SI, F2_SI)
    write_nff(tmp_path / 'o.nff', F1_O, F2_O)
    return str(tmp_path)


def test_parse_formula():
    assert parse_formula('Si') == (['Si'], [1.])
    assert parse_formula('SiO2') == (['Si', 'O'], [1., 2.])
    assert parse_formula('Al2O3') == (['Al', 'O'], [2., 3.])
    assert parse_formula('CH3CH3') == (['C', 'H'], [2., 6.])
    assert parse_formula('Si0.5Ge0.5') == (['Si', 'Ge'], [.5, .5])


@pytest.mark.parametrize('formula', ['', 'si', 'Xx2', 'Si(O2)', 42])
def test_parse_formula_invalid(formula):
    with pytest.raises(xm.InvalidInput):
        parse_formula(formula)


def test_atomic_masses():
    assert len(atomicMasses) == 92
    assert atomicMasses['Si'] == pytest.approx(28.085)
    assert atomicMasses['Au'] == pytest.approx(196.966569)


def test_element_skips_undefined_f1(f1f2dir):
    si = Element('Si', f1f2dir)
    assert si.Z == 14
    assert si.E[0] == 1000.
    np.testing.assert_allclose(si.get_f1f2(np.array([5000.])), F1_SI + 1j*F2_SI)
    with pytest.raises(xm.AdapterFailure):
        si.get_f1f2(np.array([50000.]))


def test_missing_table(tmp_path):
    with pytest.raises(xm.AdapterFailure, match='not found'):
        Element('Au', str(tmp_path))


def test_formula_index_silicon(f1f2dir):
    E = np.array([8000.])
    res = xm.FormulaIndex(f1f2dir)('Si', 2.33, E, 'energy')
    k = 1e-24 * AVOGADRO * R0 / PI2 * (CH / 8000.)**2 * 2.33 / atomicMasses['Si']
    assert res.shape == (1, 2)
    np.testing.assert_allclose(res[0], [k * F1_SI, k * F2_SI], rtol=1e-12)
    # about 7.7e-6 for Si at 8 keV
    assert 7e-6 < res[0, 0] < 8.5e-6


def test_formula_index_compound(f1f2dir):
    E = np.array([4000., 8000.])
    res = xm.FormulaIndex(f1f2dir)('SiO2', 2.2, E, 'energy')
    mass = atomicMasses['Si'] + 2 * atomicMasses['O']
    k = 1e-24 * AVOGADRO * R0 / PI2 * (CH / E)**2 * 2.2 / mass
    np.testing.assert_allclose(res[:, 0], k * (F1_SI + 2*F1_O), rtol=1e-12)
    np.testing.assert_allclose(res[:, 1], k * (F2_SI + 2*F2_O), rtol=1e-12)


def test_wavelength_samples_are_converted(f1f2dir):
    index = xm.FormulaIndex(f1f2dir)
    byEnergy = index('Si', 2.33, [CH / 2.], 'energy')
    byWavelength = index('Si', 2.33, [2.], 'wavelength')
    np.testing.assert_allclose(byWavelength, byEnergy, rtol=1e-12)
    with pytest.raises(xm.InvalidInput):
        index('Si', 2.33, [2.], 'frequency')


def test_absorption_coefficient():
    index = xm.ConstantIndex(1e-5, 1e-6)
    mu = index.get_absorption_coefficient('X', 1., 10000.)
    np.testing.assert_allclose(mu, 2e-6 * 10000. / CHBAR * 1e8)


def test_formula_index_scalar_out_of_range(f1f2dir):
    index = xm.FormulaIndex(f1f2dir)
    with pytest.raises(xm.AdapterFailure, match='out of the data table'):
        index.get_absorption_coefficient('Si', 2.33, 50000.)


def test_formula_index_reads_tables_once(f1f2dir, caplog):
    index = xm.FormulaIndex(f1f2dir)
    with caplog.at_level('INFO', logger='xrmirror.materials'):
        index('Si', 2.33, [8000.])
        index('Si', 2.33, [4000.])
    assert len(caplog.records) == 1


def test_periodictable_silicon():
    sigma, beta = xm.PeriodicTableIndex()('Si', 2.33, [8000.]).T
    assert 7.2e-6 < sigma[0] < 8.0e-6
    assert 1e-7 < beta[0] < 3e-7


def test_periodictable_compound_and_wavelength():
    index = xm.PeriodicTableIndex()
    byEnergy = index('SiO2', 2.2, [8000.], 'energy')
    byWavelength = index('SiO2', 2.2, [CH / 8000.], 'wavelength')
    np.testing.assert_allclose(byWavelength, byEnergy, rtol=1e-9)
    assert np.all(byEnergy > 0)


@pytest.mark.parametrize('formula', ['', 'Xx2', None])
def test_periodictable_invalid_formula(formula):
    with pytest.raises(xm.InvalidInput):
        xm.PeriodicTableIndex()(formula, 1., [8000.])


def test_constant_index():
    res = xm.ConstantIndex(2e-5, 3e-6)('Au', 19.32, [1000., 2000., 3000.])
    np.testing.assert_allclose(res, [[2e-5, 3e-6]] * 3)


def test_tabulated_index_interpolation():
    E = np.linspace(1000, 10000, 10)
    table = xm.TabulatedIndex(E, 1e-5 * E / 1000, 1e-7 * E / 1000)
    res = table('Rh', 12.41, [1500., 9000.])
    np.testing.assert_allclose(res[:, 0], [1.5e-5, 9e-5], rtol=1e-9)
    np.testing.assert_allclose(res[:, 1], [1.5e-7, 9e-7], rtol=1e-9)
    with pytest.raises(xm.AdapterFailure):
        table('Rh', 12.41, [20000.])


def test_tabulated_index_from_file(tmp_path):
    fname = tmp_path / 'pt.csv'
    fname.write_text(u'Energy,sigma,beta\n'
                     u'1000,1e-4,1e-5\n'
                     u'2000,2e-4,2e-5\n'
                     u'3000,3e-4,3e-5\n')
    table = xm.TabulatedIndex.from_file(str(fname))
    res = table('Pt', 21.45, [2500.])
    np.testing.assert_allclose(res, [[2.5e-4, 2.5e-5]], rtol=1e-9)


def test_tabulated_index_shape_check():
    with pytest.raises(xm.InvalidInput):
        xm.TabulatedIndex([1000., 2000.], [1e-5], [1e-6, 1e-6])


def test_get_adapter():
    assert isinstance(xm.get_adapter(), xm.PeriodicTableIndex)
    assert xm.get_adapter() is xm.get_adapter()
    adapter = xm.get_adapter(1 - 1e-5 - 1e-6j)
    np.testing.assert_allclose(adapter('X', 1., [1000.]), [[1e-5, 1e-6]])

    def model(symbol, rho, samples, kind):
        return np.zeros((len(samples), 2))

    assert xm.get_adapter(model) is model
    with pytest.raises(xm.InvalidInput):
        xm.get_adapter('Si')
