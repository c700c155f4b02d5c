"""
Viridis perceptually-uniform palette, sampled at nine evenly spaced points

* At the lowest value → near-black purple; at the highest value → yellow
"""

STOPS = (
    "#440154", "#472d7b", "#3b528b", "#2c728e", "#21918c",
    "#28ae80", "#5ec962", "#addc30", "#fde725",
)
