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
#  Copyright (C) 2009-2012 SINTEF ICT, Applied Mathematics.
#
########################################

import re
from typing import Union


class UnitBase:
    """A unit given by its value in SI units and its symbol.

    Units are immutable. Multiplying or dividing two units gives a
    new unit whose value is the product/quotient of the SI values and
    whose symbol is composed from the two symbols.
    """

    def __init__(self, value: Union[float, "UnitBase"], symbol: str) -> None:
        self.__value = value.value if isinstance(value, UnitBase) else float(value)
        self.__symbol = symbol

    @property
    def value(self) -> float:
        """The value of one of this unit expressed in SI units."""
        return self.__value

    @property
    def raw_symbol(self) -> str:
        return self.__symbol

    @property
    def symbol(self) -> str:
        """The symbol with powers as superscripts and redundant parentheses removed."""
        powers = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")
        symbol = self.__symbol.replace("^", "").translate(powers)
        return re.sub(r"\(([^*+\-\/]+)\)", r"\1", symbol)

    def __mul__(self, other: Union["UnitBase", float, int]) -> "UnitBase":
        if isinstance(other, UnitBase):
            return UnitBase(
                self.value * other.value, f"{self.raw_symbol}*{other.raw_symbol}"
            )
        if isinstance(other, (float, int)):
            return UnitBase(self.value * float(other), self.raw_symbol)

        raise TypeError(
            "You can only multiply this unit with another unit, a float or an integer."
        )

    def __truediv__(self, other: Union["UnitBase", float, int]) -> "UnitBase":
        if isinstance(other, UnitBase):
            return UnitBase(
                self.value / other.value, f"{self.raw_symbol}/({other.raw_symbol})"
            )
        if isinstance(other, (float, int)):
            return UnitBase(self.value / float(other), self.raw_symbol)

        raise TypeError(
            "You can only divide this unit by another unit, a float or an integer."
        )

    def __repr__(self) -> str:
        return f"UnitBase({self.value!r}, {self.raw_symbol!r})"


# pylint: disable=too-few-public-methods
class Prefix:
    """Namespace for unit prefixes."""

    class Base:
        """A scale factor with a symbol, applied to a unit by multiplication.

        Attributes:
            factor: The prefix factor (e.g. for centi: 1.0e-2)
            symbol: The prefix symbol (e.g. for centi: c)
        """

        def __init__(self, factor: float, symbol: str) -> None:
            self.factor = factor
            self.symbol = symbol

        def __mul__(self, unit: UnitBase) -> UnitBase:
            if isinstance(unit, UnitBase):
                return UnitBase(
                    self.factor * unit.value, f"{self.symbol}{unit.raw_symbol}"
                )

            raise TypeError("Can only be multiplied with a Unit.")

    centi = Base(1.0e-2, "c")
    deci = Base(1.0e-1, "d")


class Unit:
    """Namespace for units"""

    Base = UnitBase

    @staticmethod
    def cubic(unit: UnitBase, symbol: str = "") -> UnitBase:
        """Returns the cube of the given unit, optionally under a new symbol."""
        return UnitBase(unit.value ** 3, symbol or f"{unit.raw_symbol}^3")

    # Length
    meter = UnitBase(1.0, "m")
    centimeter = Prefix.centi * meter
    inch = UnitBase(centimeter * 2.54, "in")
    feet = UnitBase(inch * 12.0, "ft")

    # Volume
    gallon = UnitBase(inch.value ** 3 * 231.0, "gal")
    barrel = UnitBase(gallon * 42.0, "bbl")

    # Mass
    kilogram = UnitBase(1.0, "kg")
    gram = UnitBase(kilogram * 1.0e-3, "g")
    pound = UnitBase(kilogram * 0.45359237, "lb")

    # Standard gravity, m/s^2
    gravity = 9.80665

    # Pressure
    pascal = UnitBase(1.0, "Pa")
    bar = UnitBase(pascal * 1.0e5, "bar")  # pylint: disable=disallowed-name
    atm = UnitBase(pascal * 101325.0, "atm")
    psi = UnitBase(pound.value * gravity / inch.value ** 2, "psi")

    # Viscosity
    pascal_second = UnitBase(1.0, "Pa*s")
    poise = UnitBase(Prefix.deci * pascal_second, "P")
    centipoise = UnitBase(Prefix.centi * poise, "cP")

    class Convert:
        """Conversion from a unit system's measurement units to SI."""

        @staticmethod
        def from_(value: float, unit: float) -> float:
            """Converts a value given in units with SI scale `unit` to SI."""
            return value * unit
