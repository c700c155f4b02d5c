import types

import numpy as np
import pytest

import gradient_palettes
from gradient_palettes import describe_palette, get_palette, list_palettes
from colour_gradient import ColourGradient, RGBAColour


def test_palettes_are_discovered():
    assert list_palettes() == ["classic", "greyscale", "heat", "viridis"]


@pytest.mark.parametrize("name", ["classic", "greyscale", "heat", "viridis"])
def test_palette_builds_usable_gradient(name):
    gradient = get_palette(name)
    assert isinstance(gradient, ColourGradient)
    assert len(gradient) >= 2
    assert gradient.get_colour(gradient.min) == gradient.colours[0]
    assert gradient.get_colour(gradient.max) == gradient.colours[-1]
    assert gradient.to_lut(16).shape == (16, 4)


def test_default_palette_is_classic():
    assert get_palette().colours == get_palette("classic").colours


def test_unknown_palette():
    with pytest.raises(ValueError, match="Available"):
        get_palette("nope")


def test_each_call_returns_a_fresh_gradient():
    first = get_palette("greyscale")
    first.add_colour(RGBAColour(1, 2, 3))
    first.set_max(10.0)
    second = get_palette("greyscale")
    assert len(second) == 2
    assert second.max == 1.0


def test_greyscale_midpoint():
    assert get_palette("greyscale").get_colour(0.5) == RGBAColour(128, 128, 128, 255)


def test_viridis_ends():
    gradient = get_palette("viridis")
    assert len(gradient) == 9
    assert gradient.get_colour(0.0) == RGBAColour.from_hex("#440154")
    assert gradient.get_colour(1.0) == RGBAColour.from_hex("#fde725")


def test_classic_follows_terrain_heights():
    gradient = get_palette("classic")
    assert (gradient.min, gradient.max) == (-11_000.0, 9_000.0)
    assert gradient.shift_by_min
    assert len(gradient) == 81
    assert gradient.get_colour(-20_000) == RGBAColour.from_hex("#081d58")
    assert gradient.get_colour(0) == RGBAColour.from_hex("#66c2a5")
    assert gradient.get_colour(500) == RGBAColour.from_hex("#238b45")
    assert gradient.get_colour(12_000) == RGBAColour.from_hex("#ffffff")


def test_classic_heightmap_lookup():
    heights = np.array([[-11_000.0, 0.0], [500.0, 9_000.0]])
    rgba = get_palette("classic").get_colours(heights)
    assert rgba.shape == (2, 2, 4)
    assert rgba[1, 0].tolist() == list(RGBAColour.from_hex("#238b45"))


def test_describe_palette():
    assert describe_palette("heat") == "Black through red and yellow to white"
    assert describe_palette("greyscale") == "Greyscale ramp, black to white"


def test_module_without_stops_or_gradient(monkeypatch):
    monkeypatch.setitem(gradient_palettes._MODULES, "broken", types.ModuleType("broken"))
    with pytest.raises(AttributeError):
        get_palette("broken")


def test_malformed_stops(monkeypatch):
    module = types.ModuleType("malformed")
    module.STOPS = "#000000"
    monkeypatch.setitem(gradient_palettes._MODULES, "malformed", module)
    try:
        with pytest.raises(TypeError):
            get_palette("malformed")
    finally:
        gradient_palettes._parsed_stops.cache_clear()
