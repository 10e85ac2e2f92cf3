from __future__ import annotations

from typing import Mapping


def respiration_factor(points: Mapping[float, float], temp_c: float) -> float:
    """
    Heat of respiration (W/tonne) at ``temp_c``.

    Piecewise-linear between table temperatures, held flat beyond the first and
    last point. No points -> 0 (product does not respire).
    """
    if not points:
        return 0.0
    pts = sorted((float(t), float(f)) for t, f in points.items())
    t = float(temp_c)

    if t <= pts[0][0]:
        return pts[0][1]
    if t >= pts[-1][0]:
        return pts[-1][1]

    for (t_lo, f_lo), (t_hi, f_hi) in zip(pts, pts[1:]):
        if t_lo <= t <= t_hi:
            return f_lo + (f_hi - f_lo) * ((t - t_lo) / (t_hi - t_lo))
    return pts[-1][1]


def respiration_load_kw(mass_kg: float, factor_w_per_tonne: float) -> float:
    return (mass_kg / 1000.0) * factor_w_per_tonne / 1000.0
