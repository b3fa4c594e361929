# ==================================================
# mdict_codec/crypto.py
# ==================================================
"""Key derivation and the nibble-swap XOR cipher MDict uses on key-info blocks."""
import logging

from .const import BLOCK_HEADER_SIZE, KEY_SALT, DECRYPT_SEED
from .errors import TruncatedSpan
from .ripemd128 import ripemd128

logger = logging.getLogger(__name__)


def swap_nibbles(byte: int) -> int:
    return ((byte >> 4) | (byte << 4)) & 0xFF


def derive_key(block: bytes) -> bytes:
    """16-byte key: RIPEMD-128 over block[4:8] followed by the fixed salt."""
    if len(block) < BLOCK_HEADER_SIZE:
        raise TruncatedSpan(
            f"encrypted block needs a {BLOCK_HEADER_SIZE}-byte header, got {len(block)}")
    return ripemd128(bytes(block[4:8]) + KEY_SALT)


def fast_decrypt(data: bytes, key: bytes) -> bytes:
    """
    Undo the stream transform over `data`.

    State carried between bytes is (previous, position). `previous` is the
    *ciphertext* byte just consumed, not the byte just produced.
    """
    if not key:
        raise ValueError("decryption key must not be empty")
    key_len = len(key)
    out = bytearray(len(data))
    previous = DECRYPT_SEED
    for i, byte in enumerate(data):
        out[i] = swap_nibbles(byte) ^ previous ^ (i & 0xFF) ^ key[i % key_len]
        previous = byte
    return bytes(out)


def decrypt_block(block: bytes) -> bytes:
    """
    Decrypt one compressed block.
    The 8-byte block header is returned as-is; the payload after it is
    decrypted with the key derived from header bytes 4..8.
    """
    key = derive_key(block)
    head = bytes(block[:BLOCK_HEADER_SIZE])
    body = fast_decrypt(block[BLOCK_HEADER_SIZE:], key)
    logger.debug("decrypted block of %d bytes", len(block))
    return head + body
