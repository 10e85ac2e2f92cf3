from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RoomGeometry:
    length: float
    width: float
    height: float
    door_width: float
    door_height: float
    wall_area: float
    ceiling_area: float
    floor_area: float
    volume: float
    door_area: float


def room_geometry(
    length: float,
    width: float,
    height: float,
    door_width: float,
    door_height: float,
) -> RoomGeometry:
    for name, value in (
        ("length", length),
        ("width", width),
        ("height", height),
        ("door_width", door_width),
        ("door_height", door_height),
    ):
        if value < 0:
            raise ValueError(f"{name} must be >= 0")
    return RoomGeometry(
        length=length,
        width=width,
        height=height,
        door_width=door_width,
        door_height=door_height,
        wall_area=2.0 * (length * height) + 2.0 * (width * height),
        ceiling_area=length * width,
        floor_area=length * width,
        volume=length * width * height,
        door_area=door_width * door_height,
    )
