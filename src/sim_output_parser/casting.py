"""
Numeric casting utilities for simulation output fields.

Fields are parsed the way C's ``atof`` reads them in the "C" locale: the
longest valid decimal prefix is converted and anything after it is ignored.
A field with no valid prefix converts to 0. Samples are stored with 32-bit
precision.
"""

import re

import numpy as np

# Sign, mantissa, optional exponent; or the inf/nan spellings atof accepts.
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def parse_float(text: str) -> float:
    """Convert a field to float using locale-independent decimal syntax.

    Args:
        text: Unparsed field text

    Returns:
        Parsed value, or 0.0 when the field has no numeric prefix
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(0))


def to_float32(value: float) -> float:
    """Round a value to single precision; out-of-range values become infinite."""
    with np.errstate(over='ignore'):
        return float(np.float32(value))
