########################################
#
#  Copyright (C) 2021-     Equinor ASA
#
#  ecl-pvt is free software: you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation, either version 3 of the License, or
#  (at your option) any later version.
#
#  ecl-pvt is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
#
#  See the GNU General Public License at <http:#www.gnu.org/licenses/gpl.html>
#  for more details.
#
########################################
########################################
#
#  The code in this file is based on and/or inspired by opm-common,
#  which is distributed under the GNU General Public License v3.0,
#  and available at https://github.com/OPM/opm-common.
#
#  Especially in the following points this file makes use of or is
#  based on methods developed for the opm-common project:
#  - Units, unit systems and conversion of units
#
########################################

from dataclasses import dataclass
from typing import List, Tuple, Union

import numpy as np

from .eclipse_unit import EclUnits
from .units import Unit


@dataclass(frozen=True)
class Converter:
    """Converts a quantity from its measurement units to SI units.

    A converter is a pure scale factor: ``converter(x) == x * scale``.
    It works on floats and numpy arrays alike.

    Example:
        quantity = 100 bar
        scale = METRIC.pressure() = 100 000 Pa/bar
        Converter(scale)(100.0) == 10 000 000 (Pa)
    """

    scale: float

    @staticmethod
    def identity() -> "Converter":
        """A converter leaving values in their original units."""
        return Converter(1.0)

    def apply(
        self, quantity: Union[float, np.ndarray]
    ) -> Union[float, np.ndarray]:
        return Unit.Convert.from_(quantity, self.scale)

    def __call__(
        self, quantity: Union[float, np.ndarray]
    ) -> Union[float, np.ndarray]:
        return self.apply(quantity)


@dataclass(frozen=True)
class ConvertUnits:
    """Converters for the independent variable and each dependent column of a table.

    Attributes:
        independent: Converter for the independent variable.
        column: Converters for each of the dependent variables.
    """

    independent: Converter
    column: List[Converter]


def _recip(*scales: float) -> Converter:
    return Converter(1.0 / float(np.prod(scales)))


class CreateUnitConverter:
    """Namespace for methods creating unit converters"""

    @staticmethod
    def rs_scale(unit_system: EclUnits.UnitSystem) -> float:
        # Rs = [sVolume(Gas) / sVolume(Liquid)]
        return (
            unit_system.surface_volume_gas().value
            / unit_system.surface_volume_liquid().value
        )

    @staticmethod
    def rv_scale(unit_system: EclUnits.UnitSystem) -> float:
        # Rv = [sVolume(Liquid) / sVolume(Gas)]
        return (
            unit_system.surface_volume_liquid().value
            / unit_system.surface_volume_gas().value
        )

    @staticmethod
    def fvf_scale(unit_system: EclUnits.UnitSystem) -> float:
        # B = [rVolume / sVolume(Liquid)]
        return (
            unit_system.reservoir_volume().value
            / unit_system.surface_volume_liquid().value
        )

    @staticmethod
    def fvf_gas_scale(unit_system: EclUnits.UnitSystem) -> float:
        # B = [rVolume / sVolume(Gas)]
        return (
            unit_system.reservoir_volume().value
            / unit_system.surface_volume_gas().value
        )

    class ToSI:
        """Converters from a unit system's measurement units to SI.

        The reciprocal formation volume factor converters scale by
        1 / (B * ...) since tables store 1/B, 1/(B*mu) and their
        derivatives with respect to pressure or vaporised oil-gas ratio.
        """

        @staticmethod
        def density(unit_system: EclUnits.UnitSystem) -> Converter:
            return Converter(unit_system.density().value)

        @staticmethod
        def pressure(unit_system: EclUnits.UnitSystem) -> Converter:
            return Converter(unit_system.pressure().value)

        @staticmethod
        def compressibility(unit_system: EclUnits.UnitSystem) -> Converter:
            return _recip(unit_system.pressure().value)

        @staticmethod
        def dis_gas(unit_system: EclUnits.UnitSystem) -> Converter:
            return Converter(CreateUnitConverter.rs_scale(unit_system))

        @staticmethod
        def vap_oil(unit_system: EclUnits.UnitSystem) -> Converter:
            return Converter(CreateUnitConverter.rv_scale(unit_system))

        @staticmethod
        def recip_fvf(unit_system: EclUnits.UnitSystem) -> Converter:
            return _recip(CreateUnitConverter.fvf_scale(unit_system))

        @staticmethod
        def recip_fvf_deriv_press(unit_system: EclUnits.UnitSystem) -> Converter:
            # d(1/B)/dp
            return _recip(
                CreateUnitConverter.fvf_scale(unit_system),
                unit_system.pressure().value,
            )

        @staticmethod
        def recip_fvf_deriv_vap_oil(unit_system: EclUnits.UnitSystem) -> Converter:
            # d(1/B)/dRv
            return _recip(
                CreateUnitConverter.fvf_scale(unit_system),
                CreateUnitConverter.rv_scale(unit_system),
            )

        @staticmethod
        def recip_fvf_visc(unit_system: EclUnits.UnitSystem) -> Converter:
            return _recip(
                CreateUnitConverter.fvf_scale(unit_system),
                unit_system.viscosity().value,
            )

        @staticmethod
        def recip_fvf_visc_deriv_press(unit_system: EclUnits.UnitSystem) -> Converter:
            # d(1/(B*mu))/dp
            return _recip(
                CreateUnitConverter.fvf_scale(unit_system),
                unit_system.viscosity().value,
                unit_system.pressure().value,
            )

        @staticmethod
        def recip_fvf_visc_deriv_vap_oil(
            unit_system: EclUnits.UnitSystem,
        ) -> Converter:
            # d(1/(B*mu))/dRv
            return _recip(
                CreateUnitConverter.fvf_scale(unit_system),
                unit_system.viscosity().value,
                CreateUnitConverter.rv_scale(unit_system),
            )

        @staticmethod
        def recip_fvf_gas(unit_system: EclUnits.UnitSystem) -> Converter:
            return _recip(CreateUnitConverter.fvf_gas_scale(unit_system))

        @staticmethod
        def recip_fvf_gas_deriv_press(unit_system: EclUnits.UnitSystem) -> Converter:
            # d(1/B)/dp
            return _recip(
                CreateUnitConverter.fvf_gas_scale(unit_system),
                unit_system.pressure().value,
            )

        @staticmethod
        def recip_fvf_gas_deriv_vap_oil(
            unit_system: EclUnits.UnitSystem,
        ) -> Converter:
            # d(1/B)/dRv
            return _recip(
                CreateUnitConverter.fvf_gas_scale(unit_system),
                CreateUnitConverter.rv_scale(unit_system),
            )

        @staticmethod
        def recip_fvf_gas_visc(unit_system: EclUnits.UnitSystem) -> Converter:
            return _recip(
                CreateUnitConverter.fvf_gas_scale(unit_system),
                unit_system.viscosity().value,
            )

        @staticmethod
        def recip_fvf_gas_visc_deriv_press(
            unit_system: EclUnits.UnitSystem,
        ) -> Converter:
            # d(1/(B*mu))/dp
            return _recip(
                CreateUnitConverter.fvf_gas_scale(unit_system),
                unit_system.viscosity().value,
                unit_system.pressure().value,
            )

        @staticmethod
        def recip_fvf_gas_visc_deriv_vap_oil(
            unit_system: EclUnits.UnitSystem,
        ) -> Converter:
            # d(1/(B*mu))/dRv
            return _recip(
                CreateUnitConverter.fvf_gas_scale(unit_system),
                unit_system.viscosity().value,
                CreateUnitConverter.rv_scale(unit_system),
            )


def identity_unit_converter(num_columns: int = 4) -> ConvertUnits:
    """Converters keeping the independent and all dependent columns as stored."""
    return ConvertUnits(
        Converter.identity(), [Converter.identity() for _ in range(num_columns)]
    )


def dead_oil_unit_converter(unit_system: EclUnits.UnitSystem) -> ConvertUnits:
    # Inner   C0     C1         C2           C3
    # Po      1/B    1/(B*mu)   d(1/B)/dPo   d(1/(B*mu))/dPo
    to_si = CreateUnitConverter.ToSI
    return ConvertUnits(
        to_si.pressure(unit_system),
        [
            to_si.recip_fvf(unit_system),
            to_si.recip_fvf_visc(unit_system),
            to_si.recip_fvf_deriv_press(unit_system),
            to_si.recip_fvf_visc_deriv_press(unit_system),
        ],
    )


def dry_gas_unit_converter(unit_system: EclUnits.UnitSystem) -> ConvertUnits:
    # Inner   C0     C1         C2           C3
    # Pg      1/B    1/(B*mu)   d(1/B)/dPg   d(1/(B*mu))/dPg
    to_si = CreateUnitConverter.ToSI
    return ConvertUnits(
        to_si.pressure(unit_system),
        [
            to_si.recip_fvf_gas(unit_system),
            to_si.recip_fvf_gas_visc(unit_system),
            to_si.recip_fvf_gas_deriv_press(unit_system),
            to_si.recip_fvf_gas_visc_deriv_press(unit_system),
        ],
    )


def live_oil_unit_converter(
    unit_system: EclUnits.UnitSystem,
) -> Tuple[Converter, ConvertUnits]:
    # PKey   Inner   C0     C1         C2           C3
    # Rs     Po      1/B    1/(B*mu)   d(1/B)/dPo   d(1/(B*mu))/dPo
    return (
        CreateUnitConverter.ToSI.dis_gas(unit_system),
        dead_oil_unit_converter(unit_system),
    )


def wet_gas_unit_converter(
    unit_system: EclUnits.UnitSystem,
) -> Tuple[Converter, ConvertUnits]:
    # PKey   Inner   C0     C1         C2           C3
    # Pg     Rv      1/B    1/(B*mu)   d(1/B)/dRv   d(1/(B*mu))/dRv
    to_si = CreateUnitConverter.ToSI
    return (
        to_si.pressure(unit_system),
        ConvertUnits(
            to_si.vap_oil(unit_system),
            [
                to_si.recip_fvf_gas(unit_system),
                to_si.recip_fvf_gas_visc(unit_system),
                to_si.recip_fvf_gas_deriv_vap_oil(unit_system),
                to_si.recip_fvf_gas_visc_deriv_vap_oil(unit_system),
            ],
        ),
    )


def water_unit_converter(unit_system: EclUnits.UnitSystem) -> ConvertUnits:
    # Inner   C0     C1   C2         C3
    # Pw      1/B    Cw   1/(B*mu)   Cw - Cv
    to_si = CreateUnitConverter.ToSI
    return ConvertUnits(
        to_si.pressure(unit_system),
        [
            to_si.recip_fvf(unit_system),
            to_si.compressibility(unit_system),
            to_si.recip_fvf_visc(unit_system),
            to_si.compressibility(unit_system),
        ],
    )
