"""
Canonical identifier used to cluster the files of one physical propeller.

RPM and role are deliberately left out: they vary within one propeller's
file set. The same function serves data and image records.
"""
import math
from typing import Optional, Union

from ..models import FlatFileRecord

_SIGNIFICANT_DIGITS = 5


def _present(value: Optional[Union[int, float]]) -> bool:
    return value is not None and math.isfinite(value)


def format_number(value: Union[int, float]) -> str:
    """
    12.0 -> '12', 12.5 -> '12.5', 300/25.4 -> '11.811'.
    Non-integers keep five significant digits past the integer part.
    """
    if float(value).is_integer():
        return str(int(value))
    magnitude = math.floor(math.log10(abs(value)))
    digits = max(magnitude, 0) + _SIGNIFICANT_DIGITS
    return f"{value:.{digits}g}"


def build_identifier(record: FlatFileRecord) -> str:
    ident = record.manufacturer

    if _present(record.diameter_in):
        ident += f"_{format_number(record.diameter_in)}"
    if _present(record.pitch_in):
        ident += f"x{format_number(record.pitch_in)}"
    if _present(record.degree):
        ident += f"_{format_number(record.degree)}deg"
    if _present(record.blade_count):
        ident += f"_{format_number(record.blade_count)}b"
    if record.tractor_pusher is not None:
        ident += f"_{record.tractor_pusher.value}"
    if _present(record.specimen):
        ident += f"_spec{format_number(record.specimen)}"

    return ident
