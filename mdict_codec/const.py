# ==================================================
# mdict_codec/const.py
# ==================================================
import os

# ── number formats (big-endian on disk) ─────────────
UINT8_FMT  = ">B"
UINT16_FMT = ">H"
UINT32_FMT = ">I"
UINT64_FMT = ">Q"
SAFE_UINT64_BYTE0 = 0x00     # first byte must be zero …
SAFE_UINT64_BYTE1 = 0x20     # … and the second below this (< 2**53)

# ── block cipher ─────────────────────────────────────
BLOCK_HEADER_SIZE = 8         # comp type (4) + checksum (4), never encrypted
KEY_SALT = b"\x95\x36\x00\x00"   # appended to block[4:8] before hashing
DECRYPT_SEED = 0x36           # initial "previous" byte

# ── header ───────────────────────────────────────────
HEADER_TAGS = ("Dictionary", "Library_Data")
MODERN_ENGINE_VERSION = 2.0   # 64-bit numbers from this version on
RESOURCE_ENCODING = "UTF-16"
ENCODING_ALIASES = {"GBK": "GB18030", "GB2312": "GB18030"}
TRUTHY = ("yes", "true")

# ── fuzzy matching ───────────────────────────────────
NO_MATCH_DISTANCE = 9999

# ── environment overrides ────────────────────────────
DEFAULT_ENCODING   = os.getenv("MDICT_DEFAULT_ENCODING", "UTF-8")
FUZZY_LIMIT        = int(os.getenv("MDICT_FUZZY_LIMIT", "10"))
FUZZY_MAX_DISTANCE = int(os.getenv("MDICT_FUZZY_MAX_DISTANCE", "5"))
