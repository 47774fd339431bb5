from typing import Callable, Dict, List, Optional, Sequence

import pytest

from ecl_pvt.init_file import InitFileDefinitions


def _init_file(
    unit_system: int = 1,
    phases: int = 0,
    tabdims: Optional[Dict[int, int]] = None,
    tab: Sequence[float] = (),
    has_rs: bool = False,
    has_rv: bool = False,
) -> Dict[str, List]:
    intehead = [0] * 20
    intehead[InitFileDefinitions.INTEHEAD_UNIT_INDEX] = unit_system
    intehead[InitFileDefinitions.INTEHEAD_PHASE_INDEX] = phases

    tabdims_array = [0] * 25
    for item, value in (tabdims or {}).items():
        tabdims_array[item] = value

    return {
        InitFileDefinitions.INTEHEAD_KW: intehead,
        InitFileDefinitions.LOGIHEAD_KW: [has_rs, has_rv] + [False] * 10,
        InitFileDefinitions.TABDIMS_KW: tabdims_array,
        InitFileDefinitions.TAB_KW: list(tab),
    }


@pytest.fixture(name="make_init_file")
def make_init_file_fixture() -> Callable[..., Dict[str, List]]:
    """Factory for in-memory INIT files mapping keywords to flat arrays."""
    return _init_file


@pytest.fixture(name="dead_fluid_init_file")
def dead_fluid_init_file_fixture() -> Dict[str, List]:
    """METRIC INIT file holding one PVDO table (3 rows, the last one padding)
    and one PVDG table (2 rows) with densities of a single region.
    """
    tab = [
        # DENSITY: oil, water, gas
        800.0,
        1000.0,
        1.0,
        # PVDO key
        0.0,
        # PVDO: Po, 1/B, 1/(B*mu), d(1/B)/dPo, d(1/(B*mu))/dPo
        *[100.0, 200.0, 2.0e20],
        *[0.8, 0.9, 2.0e20],
        *[0.4, 0.3, 2.0e20],
        *[0.0, 0.0, 2.0e20],
        *[0.0, 0.0, 2.0e20],
        # PVDG key
        0.0,
        # PVDG: Pg, 1/B, 1/(B*mu), d(1/B)/dPg, d(1/(B*mu))/dPg
        *[50.0, 150.0],
        *[100.0, 200.0],
        *[1.0e4, 1.0e4],
        *[0.0, 0.0],
        *[0.0, 0.0],
    ]
    return _init_file(
        unit_system=1,
        phases=InitFileDefinitions.PHASE_OIL_BIT | InitFileDefinitions.PHASE_GAS_BIT,
        tabdims={
            InitFileDefinitions.TABDIMS_IBPVTO_OFFSET_ITEM: 5,
            InitFileDefinitions.TABDIMS_JBPVTO_OFFSET_ITEM: 4,
            InitFileDefinitions.TABDIMS_NRPVTO_ITEM: 1,
            InitFileDefinitions.TABDIMS_NPPVTO_ITEM: 3,
            InitFileDefinitions.TABDIMS_NTPVTO_ITEM: 1,
            InitFileDefinitions.TABDIMS_IBPVTG_OFFSET_ITEM: 21,
            InitFileDefinitions.TABDIMS_JBPVTG_OFFSET_ITEM: 20,
            InitFileDefinitions.TABDIMS_NRPVTG_ITEM: 1,
            InitFileDefinitions.TABDIMS_NPPVTG_ITEM: 2,
            InitFileDefinitions.TABDIMS_NTPVTG_ITEM: 1,
            InitFileDefinitions.TABDIMS_IBDENS_OFFSET_ITEM: 1,
            InitFileDefinitions.TABDIMS_NTDENS_ITEM: 1,
        },
        tab=tab,
    )
