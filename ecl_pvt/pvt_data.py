########################################
#
#  Copyright (C) 2020-     Equinor ASA
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

import logging
from typing import Callable, List, Optional

import numpy as np
import pandas as pd

from .eclipse_unit import EclUnitEnum, EclUnits
from .init_file import (
    EclPhaseIndex,
    EclPropertyTableRawData,
    dead_oil_raw_data,
    dry_gas_raw_data,
    surface_mass_density,
    unit_system_of,
)
from .pvdx import PVDx, RawCurve
from .unit_converter import (
    ConvertUnits,
    dead_oil_unit_converter,
    dry_gas_unit_converter,
    identity_unit_converter,
)
from .units import UnitBase

LOGGER = logging.getLogger(__name__)

COLUMNS = [
    "PVTNUM",
    "KEYWORD",
    "PRESSURE",
    "PRESSURE_UNIT",
    "VOLUMEFACTOR",
    "VOLUMEFACTOR_UNIT",
    "VISCOSITY",
    "VISCOSITY_UNIT",
    "DENSITY",
    "DENSITY_UNIT",
]


def _table_frame(
    keyword: str,
    raw: EclPropertyTableRawData,
    convert: ConvertUnits,
    surface_densities: np.ndarray,
    units: EclUnits.UnitSystem,
    surface_volume: Callable[[], UnitBase],
) -> pd.DataFrame:
    if len(surface_densities) != raw.num_tables:
        raise ValueError(
            "The given Eclipse INIT file seems to be broken "
            f"(found {len(surface_densities)} surface density values "
            f"for {raw.num_tables} {keyword} regions)."
        )

    frames: List[pd.DataFrame] = []
    for region_index in range(raw.num_tables):
        table = PVDx.from_raw_table(region_index, raw, convert)
        pressure, volume_factor = table.get_pvt_curve(RawCurve.FVF)
        _, viscosity = table.get_pvt_curve(RawCurve.VISCOSITY)

        frames.append(
            pd.DataFrame(
                {
                    "PVTNUM": region_index + 1,
                    "KEYWORD": keyword,
                    "PRESSURE": pressure,
                    "PRESSURE_UNIT": units.pressure().symbol,
                    "VOLUMEFACTOR": volume_factor,
                    "VOLUMEFACTOR_UNIT": (
                        f"{units.reservoir_volume().symbol}"
                        f"/{surface_volume().symbol}"
                    ),
                    "VISCOSITY": viscosity,
                    "VISCOSITY_UNIT": units.viscosity().symbol,
                    # rho = rho_sc / B
                    "DENSITY": surface_densities[region_index] / volume_factor,
                    "DENSITY_UNIT": units.density().symbol,
                }
            )
        )

    return pd.concat(frames, ignore_index=True)


def pvt_curve_frame(ecl_file, keep_unit_system: bool = False) -> pd.DataFrame:
    """Tabulates the dead oil (PVDO) and dry gas (PVDG) curves of an INIT file.

    One row per tabulated pressure node and PVT region. Volume factor and
    viscosity are the raw table nodes, density is the surface density
    divided by the volume factor.

    Args:
        ecl_file: Eclipse INIT file, or anything returning ecl_file[keyword]
        keep_unit_system:
            True if values shall be kept in the file's unit system,
            False if they shall be converted to SI.

    Returns:
        A data frame with the columns listed in COLUMNS.

    """
    file_units = unit_system_of(ecl_file)
    units = (
        file_units
        if keep_unit_system
        else EclUnits.create_unit_system(EclUnitEnum.ECL_SI_UNITS)
    )

    def converter(
        create: Callable[[EclUnits.UnitSystem], ConvertUnits]
    ) -> ConvertUnits:
        return identity_unit_converter() if keep_unit_system else create(file_units)

    frames: List[pd.DataFrame] = []

    oil: Optional[EclPropertyTableRawData] = dead_oil_raw_data(ecl_file)
    if oil is not None:
        frames.append(
            _table_frame(
                "PVDO",
                oil,
                converter(dead_oil_unit_converter),
                surface_mass_density(
                    ecl_file, EclPhaseIndex.LIQUID, keep_unit_system
                ),
                units,
                units.surface_volume_liquid,
            )
        )

    gas: Optional[EclPropertyTableRawData] = dry_gas_raw_data(ecl_file)
    if gas is not None:
        frames.append(
            _table_frame(
                "PVDG",
                gas,
                converter(dry_gas_unit_converter),
                surface_mass_density(
                    ecl_file, EclPhaseIndex.VAPOUR, keep_unit_system
                ),
                units,
                units.surface_volume_gas,
            )
        )

    if not frames:
        LOGGER.info("No dead oil or dry gas PVT tables found.")
        return pd.DataFrame(columns=COLUMNS)

    data_frame = pd.concat(frames, ignore_index=True)[COLUMNS]
    LOGGER.info(
        f"Tabulated {len(data_frame)} PVT nodes in {units.name} units "
        f"(stored in {file_units.name})"
    )
    return data_frame
