"""
Heatmap ramp: black, red, yellow, white
"""

description = "Black through red and yellow to white"

STOPS = ("#000000ff", "#ff0000ff", "#ffff00ff", "#ffffffff")
