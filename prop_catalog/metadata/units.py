"""
Unit corrections for diameter/pitch values read from file names.

Sizes are nominally inches. Two anomalies exist in the dataset:
  - some manufacturers drop the decimal point of half-inch sizes (125 -> 12.5)
  - some sizes are given in millimeters
A manufacturer listed in config.UNIT_QUIRKS gets only its own rule; everyone
else gets the millimeter detection.
"""
from typing import Callable, Dict, Optional, Tuple

from .. import config

Size = Tuple[Optional[float], Optional[float]]


def _exceeds(value: Optional[float], threshold: float) -> bool:
    return value is not None and value > threshold


def half_inch_rule(diameter: Optional[float], pitch: Optional[float]) -> Size:
    if _exceeds(diameter, config.HALF_INCH_DIAMETER_THRESHOLD):
        diameter = diameter / config.HALF_INCH_DIVISOR
    if _exceeds(pitch, config.HALF_INCH_PITCH_THRESHOLD):
        pitch = pitch / config.HALF_INCH_DIVISOR
    return diameter, pitch


def millimeter_rule(diameter: Optional[float], pitch: Optional[float]) -> Size:
    if _exceeds(diameter, config.MM_DIAMETER_THRESHOLD):
        diameter = diameter / config.MM_PER_INCH
        if pitch is not None:
            pitch = pitch / config.MM_PER_INCH
    return diameter, pitch


QUIRK_RULES: Dict[str, Callable[[Optional[float], Optional[float]], Size]] = {
    'half_inch': half_inch_rule,
}


def normalize_units(manufacturer: str,
                    diameter: Optional[float],
                    pitch: Optional[float]) -> Size:
    """Returns (diameter, pitch) in inches."""
    quirk = config.UNIT_QUIRKS.get(manufacturer)
    if quirk is not None:
        return QUIRK_RULES[quirk](diameter, pitch)
    return millimeter_rule(diameter, pitch)
