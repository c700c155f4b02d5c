"""
gradient_palettes package
-------------------------
Every *.py module placed here is discovered automatically.
Each module *must* provide one of:

* gradient() -> ColourGradient
* STOPS (sequence of '#rrggbb' / '#rrggbbaa' strings, evenly spaced)

Optionally:
    DOMAIN      : (min, max) tuple for STOPS palettes, default (0.0, 1.0)
    description : one-line description (str)
"""

from functools import lru_cache
import importlib
import pkgutil
from typing import Tuple

from colour_gradient import DEFAULT_MAX, DEFAULT_MIN, ColourGradient, RGBAColour

DEFAULT_PALETTE = "classic"


def _discover():
    """Scan the package for palette modules and return {name: module}."""
    modules = {}
    for _, modname, ispkg in pkgutil.iter_modules(__path__):
        if ispkg:
            continue
        modules[modname] = importlib.import_module(f"{__name__}.{modname}")
    return modules

_MODULES = _discover()

# ------------------------------------------------------------
# Public API
# ------------------------------------------------------------
def list_palettes():
    """Names of the available palettes."""
    return sorted(_MODULES.keys())


def _module(name: str):
    if name not in _MODULES:
        raise ValueError(f"Unknown palette '{name}'. Available: {list_palettes()}")
    return _MODULES[name]


@lru_cache(maxsize=None)
def _parsed_stops(name: str) -> Tuple[RGBAColour, ...]:
    stops = _module(name).STOPS
    if isinstance(stops, str) or not all(isinstance(s, str) for s in stops):
        raise TypeError(f"{name}.STOPS must be a sequence of hex colour strings")
    return tuple(RGBAColour.from_hex(s) for s in stops)


def get_palette(name: str = DEFAULT_PALETTE) -> ColourGradient:
    """
    Return a new gradient for the named palette.
    - module.gradient() is tried first
    - then module.STOPS, spread over module.DOMAIN
    """
    mod = _module(name)

    if hasattr(mod, "gradient") and callable(mod.gradient):
        return mod.gradient()
    if hasattr(mod, "STOPS"):
        minimum, maximum = getattr(mod, "DOMAIN", (DEFAULT_MIN, DEFAULT_MAX))
        return ColourGradient(_parsed_stops(name), minimum=minimum, maximum=maximum)
    raise AttributeError(f"{name} must expose gradient() or STOPS.")


def describe_palette(name: str) -> str:
    mod = _module(name)
    description = getattr(mod, "description", None)
    if description:
        return description
    doc = (mod.__doc__ or "").strip()
    return doc.splitlines()[0] if doc else name
