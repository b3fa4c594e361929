# ==================================================
# mdict_codec/numeric.py
# ==================================================
import logging
import struct
from enum import IntEnum

from .const import (UINT8_FMT, UINT16_FMT, UINT32_FMT, UINT64_FMT,
                    SAFE_UINT64_BYTE0, SAFE_UINT64_BYTE1,
                    MODERN_ENGINE_VERSION)
from .errors import TruncatedSpan

logger = logging.getLogger(__name__)


class NumberWidth(IntEnum):
    """Width of an on-disk unsigned integer; the value is its byte count."""
    UINT8  = 1
    UINT16 = 2
    UINT32 = 4
    UINT64 = 8


def _unpack(fmt: str, buf, offset: int) -> int:
    try:
        return struct.unpack_from(fmt, buf, offset)[0]
    except struct.error as exc:
        raise TruncatedSpan(
            f"need {struct.calcsize(fmt)} bytes at offset {offset}, "
            f"span has {len(buf)}") from exc

# ----------------------------------------------------------------------
def read_uint8(buf, offset: int = 0) -> int:
    return _unpack(UINT8_FMT, buf, offset)

def read_uint16(buf, offset: int = 0) -> int:
    return _unpack(UINT16_FMT, buf, offset)

def read_uint32(buf, offset: int = 0) -> int:
    return _unpack(UINT32_FMT, buf, offset)

def read_uint64(buf, offset: int = 0) -> int:
    """
    Decode a big-endian 64-bit value.
    Only values below 2**53 are accepted: anything with a non-zero first
    byte or a second byte >= 0x20 raises OverflowError instead of being
    returned, so readers built on doubles and this one agree on every file.
    """
    value = _unpack(UINT64_FMT, buf, offset)
    hi0, hi1 = buf[offset], buf[offset + 1]
    if hi0 != SAFE_UINT64_BYTE0 or hi1 >= SAFE_UINT64_BYTE1:
        logger.debug("rejecting 64-bit value %#x at offset %d", value, offset)
        raise OverflowError(
            f"64-bit value at offset {offset} exceeds 2**53 "
            f"(leading bytes {hi0:#04x} {hi1:#04x})")
    return value

# ----------------------------------------------------------------------
_READERS = {
    NumberWidth.UINT8:  read_uint8,
    NumberWidth.UINT16: read_uint16,
    NumberWidth.UINT32: read_uint32,
    NumberWidth.UINT64: read_uint64,
}

def read_number(buf, width: NumberWidth, offset: int = 0) -> int:
    """Read one number of `width` bytes at `offset`."""
    return _READERS[NumberWidth(width)](buf, offset)


def number_width_for(version: float) -> NumberWidth:
    """Offsets and sizes are 64-bit from engine 2.0 on, 32-bit before."""
    if version >= MODERN_ENGINE_VERSION:
        return NumberWidth.UINT64
    return NumberWidth.UINT32
