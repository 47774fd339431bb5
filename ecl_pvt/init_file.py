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
#  - Reading of Eclipse INIT files
#
########################################

import logging
from enum import Enum
from typing import List, Optional, Union

import numpy as np

# opm is only available for Linux, hence, ignore any import exception
# here. EclFile is only referred to in type hints; any object returning
# keyword arrays by ecl_file[keyword] can be passed instead.
try:
    from opm.io.ecl import EclFile
except ImportError:
    pass

from .eclipse_unit import EclUnits
from .unit_converter import CreateUnitConverter

LOGGER = logging.getLogger(__name__)


class InitFileDefinitions:  # pylint: disable=too-few-public-methods
    """
    A namespace for constant definitions for
    reading Eclipse INIT files.

    Item indices are 0-based positions in the respective keyword arrays,
    offsets stored in TABDIMS are 1-based positions in TAB.
    """

    LOGIHEAD_KW = "LOGIHEAD"
    INTEHEAD_KW = "INTEHEAD"
    TABDIMS_KW = "TABDIMS"
    TAB_KW = "TAB"
    INTEHEAD_UNIT_INDEX = 2
    INTEHEAD_PHASE_INDEX = 14
    LOGIHEAD_RS_INDEX = 0
    LOGIHEAD_RV_INDEX = 1
    TABDIMS_IBPVTO_OFFSET_ITEM = 6
    TABDIMS_JBPVTO_OFFSET_ITEM = 7
    TABDIMS_NRPVTO_ITEM = 8
    TABDIMS_NPPVTO_ITEM = 9
    TABDIMS_NTPVTO_ITEM = 10
    TABDIMS_IBPVTW_OFFSET_ITEM = 11
    TABDIMS_NTPVTW_ITEM = 12
    TABDIMS_IBPVTG_OFFSET_ITEM = 13
    TABDIMS_JBPVTG_OFFSET_ITEM = 14
    TABDIMS_NRPVTG_ITEM = 15
    TABDIMS_NPPVTG_ITEM = 16
    TABDIMS_NTPVTG_ITEM = 17
    TABDIMS_IBDENS_OFFSET_ITEM = 18
    TABDIMS_NTDENS_ITEM = 19

    # Bits of INTEHEAD[INTEHEAD_PHASE_INDEX]
    PHASE_OIL_BIT = 1 << 0
    PHASE_WATER_BIT = 1 << 1
    PHASE_GAS_BIT = 1 << 2


class EclPhaseIndex(Enum):
    """Enumerator holding the different phases according
    to Eclipse file conventions"""

    AQUA = 0
    LIQUID = 1
    VAPOUR = 2


# Column order of the density table in TAB: 0 <-> oil, 1 <-> water, 2 <-> gas
DENSITY_TABLE_COLUMN = {
    EclPhaseIndex.LIQUID: 0,
    EclPhaseIndex.AQUA: 1,
    EclPhaseIndex.VAPOUR: 2,
}


class InvalidArgument(ValueError):
    """An exception for invalid arguments"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EclPropertyTableRawData:  # pylint: disable=too-few-public-methods
    """
    A structure for storing a block of PVT table
    data read from the TAB keyword of an INIT file.

    Values are stored column by column; within a column
    table by table, primary key by primary key, row by row.
    """

    def __init__(self) -> None:
        self.data = np.zeros(0)
        self.primary_key: List[float] = []
        self.num_primary = 0
        self.num_rows = 0
        self.num_cols = 0
        self.num_tables = 0


def density_table_column(phase: Union[EclPhaseIndex, int]) -> int:
    """Returns the column of the given phase in the INIT file density table.

    Raises:
        InvalidArgument if phase is not one of EclPhaseIndex, or the
        integer value of one.
    """
    if not isinstance(phase, EclPhaseIndex):
        try:
            phase = EclPhaseIndex(phase)
        except ValueError as exc:
            raise InvalidArgument(f"Unsupported Phase ID: {phase}") from exc

    return DENSITY_TABLE_COLUMN[phase]


def unit_system_of(ecl_file: "EclFile") -> EclUnits.UnitSystem:
    """Returns the unit system the given INIT file stores its data in."""
    intehead = ecl_file[InitFileDefinitions.INTEHEAD_KW]
    return EclUnits.create_unit_system(
        intehead[InitFileDefinitions.INTEHEAD_UNIT_INDEX]
    )


def surface_mass_density(
    ecl_file: "EclFile",
    phase: Union[EclPhaseIndex, int],
    keep_unit_system: bool = False,
) -> np.ndarray:
    """Extracts the surface mass density of the given phase for all density regions.

    Args:
        ecl_file: The Eclipse INIT file to extract data from
        phase: Fluid phase to extract data for
        keep_unit_system:
            True if the densities shall be returned in the file's
            unit system, False if they shall be converted to SI.

    Returns:
        One surface mass density value per density region.

    Raises:
        InvalidArgument if the phase is not supported. The file is not
        read in that case.

    """
    col = density_table_column(phase)

    tabdims = ecl_file[InitFileDefinitions.TABDIMS_KW]
    tab = ecl_file[InitFileDefinitions.TAB_KW]

    # Subtract one to account for 1-based indices.
    start = tabdims[InitFileDefinitions.TABDIMS_IBDENS_OFFSET_ITEM] - 1
    nreg = tabdims[InitFileDefinitions.TABDIMS_NTDENS_ITEM]

    # Phase densities constitute 'nreg' consecutive entries of TAB,
    # starting at the phase's column offset from the table's 'start'.
    rho = np.asarray(tab[start + nreg * (col + 0) : start + nreg * (col + 1)], float)

    if keep_unit_system:
        return rho

    return CreateUnitConverter.ToSI.density(unit_system_of(ecl_file))(rho)


def _has_phase(ecl_file: "EclFile", phase_bit: int) -> bool:
    intehead = ecl_file[InitFileDefinitions.INTEHEAD_KW]
    return bool(intehead[InitFileDefinitions.INTEHEAD_PHASE_INDEX] & phase_bit)


def _read_raw_data(
    ecl_file: "EclFile",
    num_rows: int,
    num_tables: int,
    key_offset_item: int,
    data_offset_item: int,
) -> EclPropertyTableRawData:
    tab_dims = ecl_file[InitFileDefinitions.TABDIMS_KW]
    tab = ecl_file[InitFileDefinitions.TAB_KW]

    raw = EclPropertyTableRawData()
    raw.num_primary = 1
    raw.num_rows = num_rows
    raw.num_cols = 5
    raw.num_tables = num_tables

    start = tab_dims[key_offset_item] - 1
    raw.primary_key = list(tab[start : start + raw.num_primary * raw.num_tables])

    num_tab_elements = raw.num_primary * raw.num_rows * raw.num_cols * raw.num_tables
    start = tab_dims[data_offset_item] - 1
    raw.data = np.asarray(tab[start : start + num_tab_elements], float)

    if len(raw.data) != num_tab_elements:
        raise ValueError(
            "The given Eclipse INIT file seems to be broken "
            f"(expected {num_tab_elements} PVT table values in TAB, "
            f"found {len(raw.data)})."
        )

    return raw


def dead_oil_raw_data(ecl_file: "EclFile") -> Optional[EclPropertyTableRawData]:
    """Reads the PVDO tables of the given INIT file.

    Returns:
        The raw table data, or None if the file has no oil phase,
        no oil PVT tables, or live oil (PVTO) tables.

    """
    if not _has_phase(ecl_file, InitFileDefinitions.PHASE_OIL_BIT):
        return None

    tab_dims = ecl_file[InitFileDefinitions.TABDIMS_KW]
    num_tables = tab_dims[InitFileDefinitions.TABDIMS_NTPVTO_ITEM]
    if num_tables == 0:
        return None

    logihead = ecl_file[InitFileDefinitions.LOGIHEAD_KW]
    if logihead[InitFileDefinitions.LOGIHEAD_RS_INDEX]:
        LOGGER.info("Oil PVT tables hold dissolved gas (PVTO), skipping them.")
        return None

    raw = _read_raw_data(
        ecl_file,
        tab_dims[InitFileDefinitions.TABDIMS_NPPVTO_ITEM],
        num_tables,
        InitFileDefinitions.TABDIMS_JBPVTO_OFFSET_ITEM,
        InitFileDefinitions.TABDIMS_IBPVTO_OFFSET_ITEM,
    )
    LOGGER.debug(
        f"Read {raw.num_tables} PVDO table(s) in {unit_system_of(ecl_file).name} units"
    )
    return raw


def dry_gas_raw_data(ecl_file: "EclFile") -> Optional[EclPropertyTableRawData]:
    """Reads the PVDG tables of the given INIT file.

    Returns:
        The raw table data, or None if the file has no gas phase,
        no gas PVT tables, or wet gas (PVTG) tables.

    """
    if not _has_phase(ecl_file, InitFileDefinitions.PHASE_GAS_BIT):
        return None

    tab_dims = ecl_file[InitFileDefinitions.TABDIMS_KW]
    num_tables = tab_dims[InitFileDefinitions.TABDIMS_NTPVTG_ITEM]
    if num_tables == 0:
        return None

    logihead = ecl_file[InitFileDefinitions.LOGIHEAD_KW]
    if logihead[InitFileDefinitions.LOGIHEAD_RV_INDEX]:
        LOGGER.info("Gas PVT tables hold vaporised oil (PVTG), skipping them.")
        return None

    raw = _read_raw_data(
        ecl_file,
        tab_dims[InitFileDefinitions.TABDIMS_NPPVTG_ITEM],
        num_tables,
        InitFileDefinitions.TABDIMS_JBPVTG_OFFSET_ITEM,
        InitFileDefinitions.TABDIMS_IBPVTG_OFFSET_ITEM,
    )
    LOGGER.debug(f"Read {raw.num_tables} PVDG table(s)")
    return raw
