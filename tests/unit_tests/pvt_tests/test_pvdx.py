import numpy as np
import pytest

from ecl_pvt.eclipse_unit import EclUnits, UnitDefinitions
from ecl_pvt.init_file import EclPropertyTableRawData
from ecl_pvt.pvdx import PVDx, RawCurve, entry_valid
from ecl_pvt.unit_converter import (
    ConvertUnits,
    Converter,
    dead_oil_unit_converter,
    identity_unit_converter,
)
from ecl_pvt.units import UnitBase


def _fvf_unit_system() -> EclUnits.UnitSystem:
    """Unit system where B is stored as rVolume / sVolume(Liquid) = 1.0 / 0.8"""
    return EclUnits.UnitSystem(
        UnitDefinitions(
            pressure=UnitBase(1.0, "p"),
            density=UnitBase(1.0, "rho"),
            viscosity=UnitBase(1.0, "mu"),
            reservoir_volume=UnitBase(1.0, "rv"),
            surface_volume_liquid=UnitBase(0.8, "svl"),
            surface_volume_gas=UnitBase(1.0, "svg"),
        )
    )


def _table() -> PVDx:
    # B = [1.0, 1.25, 2.0], mu = [0.5, 0.4, 0.25]
    return PVDx(
        [100.0, 200.0, 400.0],
        [[1.0, 0.8, 0.5], [2.0, 2.0, 2.0]],
        identity_unit_converter(),
    )


def test_entry_valid() -> None:
    assert entry_valid(0.0)
    assert entry_valid(-1.0e19)
    assert not entry_valid(1.0e20)
    assert not entry_valid(-2.0e20)


def test_formation_volume_factor_in_si() -> None:
    table = PVDx(
        [100.0, 200.0], [[1.25, 1.0]], dead_oil_unit_converter(_fvf_unit_system())
    )

    assert table.get_independents() == pytest.approx([100.0, 200.0])
    assert table.y[0] == pytest.approx([1.0, 0.8])
    assert table.formation_volume_factor([100.0, 200.0]) == pytest.approx(
        [1.0, 1.25]
    )


def test_viscosity_in_si() -> None:
    cp_units = EclUnits.UnitSystem(
        UnitDefinitions(
            pressure=UnitBase(1.0e5, "bar"),
            density=UnitBase(1.0, "rho"),
            viscosity=UnitBase(1.0e-3, "cP"),
            reservoir_volume=UnitBase(1.0, "rv"),
            surface_volume_liquid=UnitBase(1.0, "svl"),
            surface_volume_gas=UnitBase(1.0, "svg"),
        )
    )
    table = PVDx(
        [100.0, 200.0], [[0.8, 0.9], [0.4, 0.3]], dead_oil_unit_converter(cp_units)
    )

    assert table.get_independents() == pytest.approx([1.0e7, 2.0e7])
    assert table.viscosity([1.0e7, 2.0e7]) == pytest.approx([2.0e-3, 3.0e-3])


def test_interpolation_between_nodes() -> None:
    table = _table()

    # 1/B is interpolated, not B
    assert table.formation_volume_factor([150.0, 300.0]) == pytest.approx(
        [1.0 / 0.9, 1.0 / 0.65]
    )
    assert table.viscosity([150.0]) == pytest.approx([0.45])


def test_linear_extrapolation() -> None:
    table = _table()

    assert table.formation_volume_factor([0.0, 600.0]) == pytest.approx(
        [1.0 / 1.2, 1.0 / 0.2]
    )
    assert table.viscosity([0.0]) == pytest.approx([0.6])


def test_values_at_nodes_match_curve() -> None:
    table = _table()

    pressure, fvf = table.get_pvt_curve(RawCurve.FVF)
    assert pressure == pytest.approx([100.0, 200.0, 400.0])
    assert fvf == pytest.approx([1.0, 1.25, 2.0])
    assert table.formation_volume_factor(pressure) == pytest.approx(fvf)

    pressure, viscosity = table.get_pvt_curve(RawCurve.VISCOSITY)
    assert viscosity == pytest.approx([0.5, 0.4, 0.25])
    assert table.viscosity(pressure) == pytest.approx(viscosity)


def test_curve_is_a_copy() -> None:
    table = _table()

    pressure, _ = table.get_pvt_curve(RawCurve.FVF)
    pressure[0] = -1.0
    assert table.get_independents()[0] == 100.0


def test_queries_are_repeatable() -> None:
    table = _table()
    pressures = np.array([50.0, 100.0, 275.0, 1000.0])

    first = table.formation_volume_factor(pressures)
    assert np.array_equal(first, table.formation_volume_factor(pressures))
    assert np.array_equal(table.viscosity(pressures), table.viscosity(pressures))


def test_scalar_and_empty_queries() -> None:
    table = _table()

    assert table.formation_volume_factor(200.0) == pytest.approx([1.25])
    assert len(table.viscosity([])) == 0


@pytest.mark.parametrize(
    "x, recip_fvf, pressure, expected",
    [
        # Repeated first pressure
        ([1.0, 1.0, 2.0], [1.0, 2.0, 4.0], [0.5, 1.0, 1.5], [1.0, 2.0, 3.0]),
        # Repeated interior pressure
        (
            [1.0, 2.0, 2.0, 3.0],
            [1.0, 2.0, 3.0, 4.0],
            [0.5, 1.5, 2.0, 2.5, 3.5],
            [0.5, 1.5, 2.0, 3.5, 4.5],
        ),
        # Repeated last pressure
        ([1.0, 2.0, 2.0], [1.0, 2.0, 4.0], [1.5, 2.0, 3.0], [1.5, 2.0, 3.0]),
        # Repeated first and last pressure
        (
            [1.0, 1.0, 2.0, 2.0],
            [1.0, 2.0, 3.0, 5.0],
            [0.5, 1.0, 1.5, 2.0, 2.5],
            [1.5, 2.0, 2.5, 3.0, 3.5],
        ),
    ],
)
def test_duplicate_pressure(x, recip_fvf, pressure, expected) -> None:
    table = PVDx(x, [recip_fvf, [1.0] * len(x)], identity_unit_converter())

    with np.errstate(divide="raise", invalid="raise"):
        fvf = table.formation_volume_factor(pressure)
        viscosity = table.viscosity(pressure)

    assert np.all(np.isfinite(fvf))
    assert fvf == pytest.approx(1.0 / np.array(expected))
    assert viscosity == pytest.approx(expected)

    # Tabulated nodes are kept as given
    assert table.get_independents() == pytest.approx(x)


def test_zero_reciprocal_is_not_guarded() -> None:
    table = PVDx([1.0, 2.0], [[0.0, 1.0]], identity_unit_converter())

    with np.errstate(divide="ignore"):
        assert np.isinf(table.formation_volume_factor([1.0])[0])


def test_viscosity_needs_second_column() -> None:
    table = PVDx([1.0, 2.0], [[1.0, 1.0]], identity_unit_converter())

    with pytest.raises(ValueError):
        table.viscosity([1.5])
    with pytest.raises(ValueError):
        table.get_pvt_curve(RawCurve.VISCOSITY)


@pytest.mark.parametrize(
    "x, columns",
    [
        ([1.0, 2.0], [[1.0]]),
        ([1.0, 2.0], []),
        ([2.0, 1.0], [[1.0, 1.0]]),
        ([1.0], [[1.0]]),
        ([1.0, 1.0], [[1.0, 2.0]]),
        ([1.0, 3.0, 2.0, 4.0], [[1.0, 1.0, 1.0, 1.0]]),
    ],
)
def test_invalid_tables(x, columns) -> None:
    with pytest.raises(ValueError):
        PVDx(x, columns, identity_unit_converter())


def test_missing_converter() -> None:
    with pytest.raises(ValueError):
        PVDx(
            [1.0, 2.0],
            [[1.0, 1.0], [1.0, 1.0]],
            ConvertUnits(Converter.identity(), [Converter.identity()]),
        )


def test_setup_error() -> None:
    table = _table()
    table.x = table.x[:-1]

    with pytest.raises(AssertionError, match="Setup Error"):
        table.get_pvt_curve(RawCurve.FVF)


def test_from_raw_table() -> None:
    raw = EclPropertyTableRawData()
    raw.num_primary = 1
    raw.num_rows = 3
    raw.num_cols = 5
    raw.num_tables = 2

    # Column by column, within a column table by table
    raw.data = np.array(
        [
            *[10.0, 20.0, 30.0, 100.0, 200.0, 1.0e20],
            *[1.0, 0.9, 0.8, 0.5, 0.25, 1.0e20],
            *[2.0, 2.0, 2.0, 50.0, 25.0, 1.0e20],
            *[0.0, 0.0, 0.0, 0.0, 0.0, 1.0e20],
            *[0.0, 0.0, 0.0, 0.0, 0.0, 1.0e20],
        ]
    )

    first = PVDx.from_raw_table(0, raw, identity_unit_converter())
    assert first.get_independents() == pytest.approx([10.0, 20.0, 30.0])
    assert first.get_keys() == pytest.approx([0.0, 0.0, 0.0])
    assert first.y.shape == (4, 3)

    second = PVDx.from_raw_table(1, raw, identity_unit_converter())
    assert second.get_independents() == pytest.approx([100.0, 200.0])
    _, fvf = second.get_pvt_curve(RawCurve.FVF)
    assert fvf == pytest.approx([2.0, 4.0])
    _, viscosity = second.get_pvt_curve(RawCurve.VISCOSITY)
    assert viscosity == pytest.approx([0.01, 0.01])
