"""
Colour Gradient: map scalar values (heights, intensities, ...) onto RGBA colours.
Features:
  - Ordered colour stops spread evenly over a [min, max] domain.
  - Per-channel linear blending with half-away-from-zero rounding.
  - Saturating edges: values outside the domain take the nearest end stop.
  - Vectorised lookup and lookup-table sampling via NumPy.

Usage:
  gradient = ColourGradient()
  gradient.add_colour(RGBAColour(0, 0, 0, 255))
  gradient.add_colour(RGBAColour(255, 255, 255, 255))
  gradient.get_colour(0.5)          # RGBAColour(r=128, g=128, b=128, a=255)
"""

from __future__ import annotations
import math
import warnings
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union

import numpy as np

DEFAULT_MIN = 0.0
DEFAULT_MAX = 1.0


class GradientError(ValueError):
    """Raised when a gradient is queried before it is usable."""


# ---------------------------------------------------------------------
# Colour value
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class RGBAColour:
    """Four 8-bit channels, in pixel byte order R, G, B, A."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel, value in zip("rgba", self.to_tuple()):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(
                    f"Channel '{channel}' must be an int, got {type(value).__name__}"
                )
            if not 0 <= value <= 255:
                raise ValueError(f"Channel '{channel}' out of range 0..255: {value}")
            # normalise numpy scalars so equality and hashing stay plain
            object.__setattr__(self, channel, int(value))

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_tuple())

    def to_tuple(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def to_bytes(self) -> bytes:
        """Return the colour as 4 pixel bytes (RGBA)."""
        return bytes(self.to_tuple())

    def to_hex(self) -> str:
        return "#" + "".join(f"{v:02x}" for v in self.to_tuple())

    @classmethod
    def from_hex(cls, text: str) -> "RGBAColour":
        """Parse '#rrggbb' or '#rrggbbaa' (the '#' is optional)."""
        digits = text.strip().lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Expected '#rrggbb' or '#rrggbbaa', got '{text}'")
        try:
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError as exc:
            raise ValueError(f"Invalid hex colour '{text}'") from exc
        return cls(*channels)


ColourLike = Union[RGBAColour, Sequence[int]]


def _as_colour(colour: ColourLike) -> RGBAColour:
    if isinstance(colour, RGBAColour):
        return colour
    return RGBAColour(*colour)


# ---------------------------------------------------------------------
# Channel blending
# ---------------------------------------------------------------------

def round_half_away(x: float) -> int:
    """Round to nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def interpolate_channel(start: int, finish: int, ratio: float) -> int:
    """Blend one 8-bit channel; the result saturates to 0..255."""
    blended = round_half_away((finish - start) * ratio + start)
    return min(max(blended, 0), 255)


# ---------------------------------------------------------------------
# Gradient
# ---------------------------------------------------------------------

class ColourGradient:
    """
    Ordered colour stops over a scalar domain [min, max].

    Stops are positioned implicitly at equal shares of the domain, in the
    order they were added. Nothing is validated while the gradient is being
    built; lookups raise GradientError unless there are at least two stops
    and max >= min.

    The band position is computed as ``value / (max - min) * (n - 1)``,
    i.e. from the raw value and not from its offset to ``min``. Pass
    ``shift_by_min=True`` to measure from ``min`` instead.
    """

    def __init__(
        self,
        colours: Optional[Iterable[ColourLike]] = None,
        *,
        minimum: float = DEFAULT_MIN,
        maximum: float = DEFAULT_MAX,
        shift_by_min: bool = False,
    ) -> None:
        self._colours: list[RGBAColour] = []
        self._min = float(minimum)
        self._max = float(maximum)
        self.shift_by_min = shift_by_min
        for colour in colours or ():
            self.add_colour(colour)

    @classmethod
    def from_hex(
        cls,
        hex_stops: Iterable[str],
        *,
        minimum: float = DEFAULT_MIN,
        maximum: float = DEFAULT_MAX,
        shift_by_min: bool = False,
    ) -> "ColourGradient":
        return cls(
            (RGBAColour.from_hex(h) for h in hex_stops),
            minimum=minimum,
            maximum=maximum,
            shift_by_min=shift_by_min,
        )

    # -- building -----------------------------------------------------

    def add_colour(self, colour: ColourLike) -> None:
        """Append a stop after the existing ones."""
        self._colours.append(_as_colour(colour))

    def set_min(self, value: float) -> None:
        self._min = float(value)

    def set_max(self, value: float) -> None:
        self._max = float(value)

    @property
    def colours(self) -> Tuple[RGBAColour, ...]:
        return tuple(self._colours)

    @property
    def min(self) -> float:
        return self._min

    @property
    def max(self) -> float:
        return self._max

    def __len__(self) -> int:
        return len(self._colours)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(stops={len(self._colours)}, "
            f"min={self._min!r}, max={self._max!r})"
        )

    # -- lookup -------------------------------------------------------

    def _check_usable(self) -> None:
        if len(self._colours) < 2:
            raise GradientError(
                f"Gradient needs at least 2 colours, has {len(self._colours)}"
            )
        # also rejects NaN bounds
        if not self._max >= self._min:
            raise GradientError(
                f"Gradient max ({self._max}) is below min ({self._min})"
            )

    def _band(self, value: float) -> Tuple[int, float]:
        """Return (index of the lower stop, fractional position inside the band)."""
        last_band = len(self._colours) - 2
        position = value - self._min if self.shift_by_min else value
        scaled = position / (self._max - self._min) * (len(self._colours) - 1)
        # keep idx + 1 inside the stop sequence, even for float noise just below max
        idx = int(math.floor(min(max(scaled, 0.0), float(last_band))))
        # ratio may leave [0, 1] here; the channel blend saturates instead
        ratio = scaled - idx
        return idx, ratio

    def get_colour(self, value: float) -> RGBAColour:
        """
        Return the colour for ``value``; outside the domain the end stops apply.

        End colours are the stored stops themselves, shared but immutable.
        """
        self._check_usable()
        value = float(value)

        if value >= self._max:
            return self._colours[-1]
        if value <= self._min or math.isnan(value):
            return self._colours[0]

        idx, ratio = self._band(value)
        first, second = self._colours[idx], self._colours[idx + 1]
        return RGBAColour(
            *(interpolate_channel(s, f, ratio) for s, f in zip(first, second))
        )

    def get_colours(self, values) -> np.ndarray:
        """
        Vectorised get_colour.

        Returns a uint8 array of shape ``values.shape + (4,)`` holding the
        same colours get_colour would return element by element. NaN values
        take the first stop and trigger a RuntimeWarning.
        """
        self._check_usable()
        values = np.asarray(values, dtype=np.float64)
        flat = values.reshape(-1)
        table = np.array([c.to_tuple() for c in self._colours], dtype=np.float64)

        nan = np.isnan(flat)
        if nan.any():
            warnings.warn(
                f"{int(nan.sum())} NaN value(s) mapped to the first gradient colour",
                RuntimeWarning,
                stacklevel=2,
            )

        high = flat >= self._max
        low = ~high & ((flat <= self._min) | nan)
        mid = ~(high | low)

        out = np.empty((flat.size, 4), dtype=np.uint8)
        out[high] = table[-1]
        out[low] = table[0]

        if mid.any():
            inner = flat[mid]
            position = inner - self._min if self.shift_by_min else inner
            scaled = position / (self._max - self._min) * (len(self._colours) - 1)
            idx = np.floor(np.clip(scaled, 0.0, len(self._colours) - 2)).astype(np.intp)
            ratio = (scaled - idx)[:, None]
            first, second = table[idx], table[idx + 1]
            blended = (second - first) * ratio + first
            # saturate first; operands are then >= 0, so floor(x + 0.5) rounds half away
            out[mid] = np.floor(np.clip(blended, 0.0, 255.0) + 0.5).astype(np.uint8)

        return out.reshape(values.shape + (4,))

    def to_lut(self, size: int = 256) -> np.ndarray:
        """Sample ``size`` evenly spaced values over [min, max] into uint8[size, 4]."""
        if size < 2:
            raise ValueError(f"LUT size must be at least 2, got {size}")
        self._check_usable()
        return self.get_colours(np.linspace(self._min, self._max, size))

    def stops(self) -> list[Tuple[float, RGBAColour]]:
        """Return (position, colour) for every stop, as placed by the scaling formula."""
        self._check_usable()
        step = (self._max - self._min) / (len(self._colours) - 1)
        offset = self._min if self.shift_by_min else 0.0
        return [(offset + i * step, c) for i, c in enumerate(self._colours)]

    def reversed(self) -> "ColourGradient":
        return ColourGradient(
            reversed(self._colours),
            minimum=self._min,
            maximum=self._max,
            shift_by_min=self.shift_by_min,
        )


__all__ = [
    "DEFAULT_MAX",
    "DEFAULT_MIN",
    "ColourGradient",
    "GradientError",
    "RGBAColour",
    "interpolate_channel",
    "round_half_away",
]
