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

import logging
from enum import IntEnum
from typing import Dict, NamedTuple

from .units import Unit, UnitBase

LOGGER = logging.getLogger(__name__)


class EclUnitEnum(IntEnum):
    """An enum for the different unit systems, valued as stored in INTEHEAD"""

    ECL_SI_UNITS = 0
    ECL_METRIC_UNITS = 1
    ECL_FIELD_UNITS = 2
    ECL_LAB_UNITS = 3
    ECL_PVT_M_UNITS = 4


def unit_system_name(unit_system: int) -> str:
    """Returns the Eclipse name of the given unit system, or "UNKNOWN"."""
    names = {
        EclUnitEnum.ECL_SI_UNITS: "SI",
        EclUnitEnum.ECL_METRIC_UNITS: "METRIC",
        EclUnitEnum.ECL_FIELD_UNITS: "FIELD",
        EclUnitEnum.ECL_LAB_UNITS: "LAB",
        EclUnitEnum.ECL_PVT_M_UNITS: "PVT-M",
    }
    return names.get(unit_system, "UNKNOWN")


class UnitDefinitions(NamedTuple):
    """The base units a unit system measures PVT quantities in."""

    pressure: UnitBase
    density: UnitBase
    viscosity: UnitBase
    reservoir_volume: UnitBase
    surface_volume_liquid: UnitBase
    surface_volume_gas: UnitBase


def _cubic_meter(symbol: str) -> UnitBase:
    return Unit.cubic(Unit.meter, symbol)


def _cubic_centimeter(symbol: str) -> UnitBase:
    return Unit.cubic(Unit.centimeter, symbol)


UNIT_DEFINITIONS: Dict[EclUnitEnum, UnitDefinitions] = {
    EclUnitEnum.ECL_SI_UNITS: UnitDefinitions(
        pressure=Unit.pascal,
        density=Unit.kilogram / Unit.cubic(Unit.meter),
        viscosity=Unit.pascal_second,
        reservoir_volume=_cubic_meter("Rm^3"),
        surface_volume_liquid=_cubic_meter("Sm^3"),
        surface_volume_gas=_cubic_meter("Sm^3"),
    ),
    EclUnitEnum.ECL_METRIC_UNITS: UnitDefinitions(
        pressure=Unit.bar,
        density=Unit.kilogram / Unit.cubic(Unit.meter),
        viscosity=Unit.centipoise,
        reservoir_volume=_cubic_meter("Rm^3"),
        surface_volume_liquid=_cubic_meter("Sm^3"),
        surface_volume_gas=_cubic_meter("Sm^3"),
    ),
    EclUnitEnum.ECL_FIELD_UNITS: UnitDefinitions(
        pressure=Unit.psi,
        density=Unit.pound / Unit.cubic(Unit.feet),
        viscosity=Unit.centipoise,
        reservoir_volume=Unit.Base(Unit.barrel, "RB"),
        surface_volume_liquid=Unit.Base(Unit.barrel, "stb"),
        surface_volume_gas=Unit.cubic(Unit.feet, "scf"),
    ),
    EclUnitEnum.ECL_LAB_UNITS: UnitDefinitions(
        pressure=Unit.atm,
        density=Unit.gram / Unit.cubic(Unit.centimeter),
        viscosity=Unit.centipoise,
        reservoir_volume=_cubic_centimeter("Rcm^3"),
        surface_volume_liquid=_cubic_centimeter("Scm^3"),
        surface_volume_gas=_cubic_centimeter("Scm^3"),
    ),
    EclUnitEnum.ECL_PVT_M_UNITS: UnitDefinitions(
        pressure=Unit.atm,
        density=Unit.kilogram / Unit.cubic(Unit.meter),
        viscosity=Unit.centipoise,
        reservoir_volume=_cubic_meter("Rm^3"),
        surface_volume_liquid=_cubic_meter("Sm^3"),
        surface_volume_gas=_cubic_meter("Sm^3"),
    ),
}


class EclUnits:
    """Namespace for units used in Eclipse"""

    class UnitSystem:
        """A read-only set of measurement units for PVT quantities.

        Each accessor returns a unit whose value is the factor converting
        a quantity measured in that unit to SI.
        """

        def __init__(self, definitions: UnitDefinitions, name: str = "") -> None:
            self.__definitions = definitions
            self.__name = name

        @property
        def name(self) -> str:
            return self.__name

        def pressure(self) -> UnitBase:
            return self.__definitions.pressure

        def density(self) -> UnitBase:
            return self.__definitions.density

        def viscosity(self) -> UnitBase:
            return self.__definitions.viscosity

        def reservoir_volume(self) -> UnitBase:
            return self.__definitions.reservoir_volume

        def surface_volume_liquid(self) -> UnitBase:
            return self.__definitions.surface_volume_liquid

        def surface_volume_gas(self) -> UnitBase:
            return self.__definitions.surface_volume_gas

        def dissolved_gas_oil_ratio(self) -> UnitBase:
            """
            Returns:
                Unit of the dissolved gas to oil ratio (e.g. Sm³/Sm³)
            """
            return self.surface_volume_gas() / self.surface_volume_liquid()

        def vaporised_oil_gas_ratio(self) -> UnitBase:
            """
            Returns:
                Unit of the vaporised oil to gas ratio (e.g. Sm³/Sm³)
            """
            return self.surface_volume_liquid() / self.surface_volume_gas()

    @staticmethod
    def create_unit_system(unit_system: int) -> "EclUnits.UnitSystem":
        """Creates the unit system identified by the given INTEHEAD unit code.

        Raises:
            ValueError if the code does not identify a known unit system.
        """
        try:
            convention = EclUnitEnum(unit_system)
        except ValueError as exc:
            raise ValueError(f"Unsupported Unit Convention: {unit_system}") from exc

        LOGGER.debug(f"Using {unit_system_name(convention)} unit system")
        return EclUnits.UnitSystem(
            UNIT_DEFINITIONS[convention], unit_system_name(convention)
        )
