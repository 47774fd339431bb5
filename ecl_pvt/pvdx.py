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
#  - Class structures for storing and accessing PVT data
#
########################################

from enum import Enum
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np
from scipy import interpolate

from .init_file import EclPropertyTableRawData
from .unit_converter import ConvertUnits

Pressures = Union[Sequence[float], np.ndarray]


class RawCurve(Enum):
    """The curves that can be extracted from a PVT table"""

    FVF = 0
    VISCOSITY = 1


def entry_valid(x: float) -> bool:
    """Returns:
    True if the given value is valid, i.e. < 1.0e20, else False.
    """
    return abs(x) < 1.0e20


class PVDx:
    """PVT table of dead oil or dry gas, i.e. with pressure as the only independent.

    The table stores the reciprocal formation volume factor 1/B and the
    reciprocal product of formation volume factor and viscosity 1/(B*mu),
    both of which vary more linearly with pressure than B and mu do.
    All values are stored in SI units.

    Attributes:
        x: The independent values (pressure).
        y: Two-dimensional array of the dependent values, one row per column.
    """

    def __init__(
        self,
        x: Iterable[float],
        columns: List[Iterable[float]],
        convert: ConvertUnits,
    ) -> None:
        """Converts the given independent values and dependent columns to SI units
        and creates a linear interpolant with linear extrapolation for them.

        Args:
            x: Non-decreasing independent (pressure) values. Repeated values are
                permitted and mark a discontinuity; at a repeated value the curve
                takes the value approached from lower pressures, and below a
                repeated first value the curve continues from its last repeat.
            columns:
                Dependent columns of the same length as x; 1/B first,
                1/(B*mu) second, possibly followed by their derivatives.
            convert: Converters for the independent and each of the dependent columns.

        Raises:
            ValueError if the columns do not match x in length, x is decreasing
            somewhere, or there is no interpolation interval of non-zero size.

        """
        raw_x = np.asarray(list(x), dtype=float)
        raw_columns = [np.asarray(list(column), dtype=float) for column in columns]

        if not raw_columns or len(raw_columns) > len(convert.column):
            raise ValueError("Each dependent column needs a unit converter.")
        if any(len(column) != len(raw_x) for column in raw_columns):
            raise ValueError(
                "Number of dependent values does not match "
                "number of independent values."
            )

        self.x: np.ndarray = convert.independent(raw_x)
        self.y: np.ndarray = np.array(
            [cvrt(column) for column, cvrt in zip(raw_columns, convert.column)]
        )

        if len(self.x) < 2 or self.x[0] == self.x[-1]:
            raise ValueError("No interpolation interval of non-zero size.")
        if np.any(np.diff(self.x) < 0.0):
            raise ValueError("Independent values must be non-decreasing.")

        # Repeated end pressures would give zero-width end intervals. Interpolate
        # from the last of the leading and the first of the trailing repeats.
        first = int(np.searchsorted(self.x, self.x[0], side="right")) - 1
        last = int(np.searchsorted(self.x, self.x[-1], side="left"))

        self.__interpolation = interpolate.interp1d(
            self.x[first : last + 1],
            self.y[:, first : last + 1],
            axis=1,
            assume_sorted=True,
            fill_value="extrapolate",
        )

    @classmethod
    def from_raw_table(
        cls, index_table: int, raw: EclPropertyTableRawData, convert: ConvertUnits
    ) -> "PVDx":
        """Extracts all rows of the table with the given index from raw and creates
        a PVDx from them. Reading stops at the first row with an invalid pressure,
        which is how Eclipse pads tables shorter than the declared number of rows.

        Args:
            index_table: Index of the table whose values are extracted.
            raw: Raw PVT table data read from an Eclipse INIT file.
            convert: Converters for the independent and each of the dependent columns.

        """
        column_stride = raw.num_rows * raw.num_tables * raw.num_primary
        table_start = index_table * raw.num_primary * raw.num_rows

        num_valid = 0
        for index_row in range(raw.num_rows):
            if not entry_valid(raw.data[table_start + index_row]):
                break
            num_valid += 1

        def column(index_column: int) -> np.ndarray:
            start = column_stride * index_column + table_start
            return raw.data[start : start + num_valid]

        return cls(
            column(0),
            [column(index_column) for index_column in range(1, raw.num_cols)],
            convert,
        )

    def get_keys(self) -> np.ndarray:
        """Returns all primary keys.

        There is no dependency on Rs/Rv, hence a zero for each independent value.
        """
        return np.zeros(len(self.x))

    def get_independents(self) -> np.ndarray:
        """Returns all independent (pressure) values."""
        return self.x

    def formation_volume_factor(self, pressure: Pressures) -> np.ndarray:
        """Computes all formation volume factor values for the given pressure values.

        Args:
            pressure: Pressure values (SI) the volume factors are requested for.

        Returns:
            All formation volume factor values corresponding
            to the given pressure values.

        """
        # 1 / (1 / B)
        return 1.0 / self.__evaluate(pressure)[0]

    def viscosity(self, pressure: Pressures) -> np.ndarray:
        """Computes all viscosity values for the given pressure values.

        Args:
            pressure: Pressure values (SI) the viscosity values are requested for.

        Returns:
            All viscosity values corresponding
            to the given pressure values.

        """
        self.__require_viscosity_column()

        # (1 / B) / (1 / (B * mu))
        values = self.__evaluate(pressure)
        return values[0] / values[1]

    def get_pvt_curve(self, curve: RawCurve) -> Tuple[np.ndarray, np.ndarray]:
        """Returns the tabulated nodes of the requested curve.

        The ordinates are the stored table values post-processed into
        formation volume factor or viscosity, not resampled.

        Args:
            curve: Which curve to return.

        Returns:
            A tuple of pressure values and curve values of equal length.

        """
        x = self.x.copy()

        if curve is RawCurve.FVF:
            # y == 1/B.  Convert to proper FVF.
            y = 1.0 / self.y[0]
        else:
            self.__require_viscosity_column()

            # y == 1/(B*mu). Extract viscosity through (1 / B) / (1 / (B*mu)).
            y = self.y[0] / self.y[1]

        assert len(x) == len(y), "Setup Error"

        return x, y

    def __evaluate(self, pressure: Pressures) -> np.ndarray:
        """Inter-/extrapolates all dependent columns at the given pressure values.

        Returns:
            A two-dimensional array, one row per dependent column.

        """
        points = np.atleast_1d(np.asarray(pressure, dtype=float))
        return self.__interpolation(points)

    def __require_viscosity_column(self) -> None:
        if len(self.y) < 2:
            raise ValueError("Table does not hold a 1/(B*mu) column.")
