from importlib.metadata import PackageNotFoundError, version

from .eclipse_unit import EclUnitEnum, EclUnits
from .init_file import (
    EclPhaseIndex,
    InitFileDefinitions,
    InvalidArgument,
    surface_mass_density,
)
from .pvdx import PVDx, RawCurve
from .pvt_data import pvt_curve_frame
from .unit_converter import ConvertUnits, Converter, CreateUnitConverter
from .units import Unit

try:
    __version__ = version(__name__.replace("_", "-"))
except PackageNotFoundError:
    # package is not installed
    pass
