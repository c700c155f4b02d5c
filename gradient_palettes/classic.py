"""
Classic blue-green-orange-white terrain palette (TerrainRGB-like), in metres
"""
import numpy as np
from functools import lru_cache

from colour_gradient import ColourGradient, RGBAColour

description = "Bathymetry blues to lowland greens, orange uplands and white peaks"

_SEGMENTS = (
    (-11_000, "#081d58"), (-6_000, "#225ea8"), (-1_000, "#41b6c4"),
    (      0, "#66c2a5"), (   500, "#238b45"), ( 2_000, "#fdae61"),
    (  4_500, "#a6611a"), ( 9_000, "#ffffff"),
)
_STEP = 250  # metres between resampled stops


@lru_cache(maxsize=1)
def _stops() -> tuple:
    # segments are unevenly spaced; resample them onto an even grid of stops
    h_pts = np.array([h for h, _ in _SEGMENTS], np.float64)
    rgb_pts = np.array(
        [RGBAColour.from_hex(c).to_tuple() for _, c in _SEGMENTS], np.float64)
    heights = np.arange(h_pts[0], h_pts[-1] + _STEP, _STEP, dtype=np.float64)
    channels = [np.interp(heights, h_pts, rgb_pts[:, i]) for i in range(4)]
    rgba = np.floor(np.stack(channels, axis=1) + 0.5).astype(np.uint8)
    return tuple(RGBAColour(*row) for row in rgba.tolist())


def gradient() -> ColourGradient:
    # the domain starts below zero, so band positions are measured from min
    return ColourGradient(
        _stops(),
        minimum=_SEGMENTS[0][0],
        maximum=_SEGMENTS[-1][0],
        shift_by_min=True,
    )
