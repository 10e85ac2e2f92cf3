"""
coolcalc_core: refrigeration cooling-load engine.

- cold room, freezer and blast freezer load calculations
- reference tables and design constants in ``coolcalc_core/data`` (YAML)
- JSON / CSV reporting of a calculation

No UI and no storage: every calculation is a pure function of its inputs
and the catalog.
"""

from .blast_freezer import calc_blast_freezer_load
from .calculate import calculate
from .catalog import load_catalog, normalize_room_type
from .cold_room import calc_cold_room_load
from .export_payload import breakdown_frame, build_payload, write_csv, write_json
from .freezer import calc_freezer_load
from .inputs import BlastFreezerInputs, ColdRoomInputs, FreezerInputs, load_form_file
from .u_factor import get_u_factor, resolve_u_factor

__all__ = [
    "BlastFreezerInputs",
    "ColdRoomInputs",
    "FreezerInputs",
    "breakdown_frame",
    "build_payload",
    "calc_blast_freezer_load",
    "calc_cold_room_load",
    "calc_freezer_load",
    "calculate",
    "get_u_factor",
    "load_catalog",
    "load_form_file",
    "normalize_room_type",
    "resolve_u_factor",
    "write_csv",
    "write_json",
]
