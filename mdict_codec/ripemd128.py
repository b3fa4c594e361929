# ==================================================
# mdict_codec/ripemd128.py
# ==================================================
"""
RIPEMD-128 (Dobbertin, Bosselaers, Preneel 1996).

Neither hashlib nor OpenSSL ship this digest, and MDict only ever hashes a
handful of bytes with it, so a plain-Python version is enough.
"""
import struct

_MASK = 0xFFFFFFFF
_IV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# message word order, left and right lines
_R = (
     0,  1,  2,  3,  4,  5,  6,  7,  8,  9, 10, 11, 12, 13, 14, 15,
     7,  4, 13,  1, 10,  6, 15,  3, 12,  0,  9,  5,  2, 14, 11,  8,
     3, 10, 14,  4,  9, 15,  8,  1,  2,  7,  0,  6, 13, 11,  5, 12,
     1,  9, 11, 10,  0,  8, 12,  4, 13,  3,  7, 15, 14,  5,  6,  2,
)
_RP = (
     5, 14,  7,  0,  9,  2, 11,  4, 13,  6, 15,  8,  1, 10,  3, 12,
     6, 11,  3,  7,  0, 13,  5, 10, 14, 15,  8, 12,  4,  9,  1,  2,
    15,  5,  1,  3,  7, 14,  6,  9, 11,  8, 12,  2, 10,  0,  4, 13,
     8,  6,  4,  1,  3, 11, 15,  0,  5, 12,  2, 13,  9,  7, 10, 14,
)
# rotate amounts, left and right lines
_S = (
    11, 14, 15, 12,  5,  8,  7,  9, 11, 13, 14, 15,  6,  7,  9,  8,
     7,  6,  8, 13, 11,  9,  7, 15,  7, 12, 15,  9, 11,  7, 13, 12,
    11, 13,  6,  7, 14,  9, 13, 15, 14,  8, 13,  6,  5, 12,  7,  5,
    11, 12, 14, 15, 14, 15,  9,  8,  9, 14,  5,  6,  8,  6,  5, 12,
)
_SP = (
     8,  9,  9, 11, 13, 15, 15,  5,  7,  7,  8, 11, 14, 14, 12,  6,
     9, 13, 15,  7, 12,  8,  9, 11,  7,  7, 12,  7,  6, 15, 13, 11,
     9,  7, 15, 11,  8,  6,  6, 14, 12, 13,  5, 14, 13, 13,  7,  5,
    15,  5,  8, 11, 14, 14,  6, 14,  6,  9, 12,  9, 12,  5, 15,  8,
)
_K  = (0x00000000, 0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC)
_KP = (0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x00000000)


def _f(j: int, x: int, y: int, z: int) -> int:
    rnd = j >> 4
    if rnd == 0:
        return x ^ y ^ z
    if rnd == 1:
        return (x & y) | (~x & z)
    if rnd == 2:
        return (x | (~y & _MASK)) ^ z
    return (x & z) | (y & ~z)


def _rol(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _blocks(message: bytes):
    """Pad to a multiple of 64 bytes and yield each block as 16 LE words."""
    bit_len = (len(message) * 8) & 0xFFFFFFFFFFFFFFFF
    padded = bytes(message) + b"\x80"
    padded += b"\x00" * ((56 - len(padded)) % 64)
    padded += struct.pack("<Q", bit_len)
    for off in range(0, len(padded), 64):
        yield struct.unpack_from("<16L", padded, off)


def ripemd128(message: bytes) -> bytes:
    """Return the 16-byte RIPEMD-128 digest of `message`."""
    h0, h1, h2, h3 = _IV
    for x in _blocks(message):
        a, b, c, d = h0, h1, h2, h3
        ap, bp, cp, dp = h0, h1, h2, h3
        for j in range(64):
            t = _rol((a + _f(j, b, c, d) + x[_R[j]] + _K[j >> 4]) & _MASK, _S[j])
            a, d, c, b = d, c, b, t
            t = _rol((ap + _f(63 - j, bp, cp, dp) + x[_RP[j]] + _KP[j >> 4]) & _MASK,
                     _SP[j])
            ap, dp, cp, bp = dp, cp, bp, t
        t  = (h1 + c + dp) & _MASK
        h1 = (h2 + d + ap) & _MASK
        h2 = (h3 + a + bp) & _MASK
        h3 = (h0 + b + cp) & _MASK
        h0 = t
    return struct.pack("<4L", h0, h1, h2, h3)
