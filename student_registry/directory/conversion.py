"""Double → single precision narrowing used on every adapter write path."""

import logging
import math
import struct

__all__ = ["narrow_to_float32"]

logger = logging.getLogger(__name__)

_FLOAT32 = struct.Struct("<f")


def narrow_to_float32(value: float) -> float:
    """
    Return *value* rounded to the nearest IEEE-754 single-precision number.

    Precision loss is expected and not an error. There is no range check:
    finite values too large for single precision become ±inf, as a native
    double-to-float cast does. NaN and infinities pass through.
    """
    value = float(value)
    try:
        narrowed = _FLOAT32.unpack(_FLOAT32.pack(value))[0]
    except OverflowError:
        narrowed = math.copysign(math.inf, value)

    if narrowed != value and not math.isnan(value):
        logger.debug("Narrowed %r to single precision %r", value, narrowed)
    return narrowed
