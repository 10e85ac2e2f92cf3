from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from .blast_freezer import BlastFreezerResult, calc_blast_freezer_load
from .catalog import Catalog, load_catalog, normalize_room_type
from .cold_room import ColdRoomResult, calc_cold_room_load
from .freezer import FreezerResult, calc_freezer_load
from .inputs import BlastFreezerInputs, ColdRoomInputs, FreezerInputs

logger = logging.getLogger(__name__)

LoadResult = Union[ColdRoomResult, FreezerResult, BlastFreezerResult]

_CALCULATORS = {
    "cold_room": (ColdRoomInputs, calc_cold_room_load),
    "freezer": (FreezerInputs, calc_freezer_load),
    "blast_freezer": (BlastFreezerInputs, calc_blast_freezer_load),
}


def calculate(
    room_type: str,
    form: Mapping[str, Any] | None = None,
    catalog: Catalog | None = None,
) -> LoadResult:
    """
    Parse ``form`` for ``room_type`` and run its load calculation.

    Missing or unparseable form values take the room-type defaults, so an
    empty form yields the default design.
    """
    key = normalize_room_type(room_type)
    if catalog is None:
        catalog = load_catalog()
    inputs_cls, calc = _CALCULATORS[key]
    inputs = inputs_cls.from_form(form or {}, catalog)
    result = calc(inputs, catalog)
    logger.info(
        "%s: final load %.3f kW / %.3f TR / %.0f BTU/hr",
        key,
        result.summary.final_kw,
        result.summary.final_tr,
        result.summary.btu_hr,
    )
    return result
