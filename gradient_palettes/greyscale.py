"""
Greyscale ramp, black to white
"""

STOPS = ("#000000", "#ffffff")
