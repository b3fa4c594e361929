from .crypto import decrypt_block, derive_key, fast_decrypt
from .distance import Suggestion, levenshtein_distance, suggest
from .errors import (HeaderMissing, InvalidArgument, InvalidHeader,
                     MdictError, TruncatedSpan)
from .header import (HeaderSettings, decode_header_text, decode_text,
                     is_true, parse_header, read_header_settings)
from .keys import (Flavor, KeyOrder, adapt_key, bisect_keys, casefold_compare,
                   flavor_for, get_extension, locale_compare, ordinal_compare,
                   select_key_order, strip_key)
from .numeric import (NumberWidth, number_width_for, read_number, read_uint8,
                      read_uint16, read_uint32, read_uint64)
from .ripemd128 import ripemd128

__all__ = [
    "decrypt_block", "derive_key", "fast_decrypt",
    "Suggestion", "levenshtein_distance", "suggest",
    "HeaderMissing", "InvalidArgument", "InvalidHeader", "MdictError", "TruncatedSpan",
    "HeaderSettings", "decode_header_text", "decode_text", "is_true",
    "parse_header", "read_header_settings",
    "Flavor", "KeyOrder", "adapt_key", "bisect_keys", "casefold_compare",
    "flavor_for", "get_extension", "locale_compare", "ordinal_compare",
    "select_key_order", "strip_key",
    "NumberWidth", "number_width_for", "read_number", "read_uint8",
    "read_uint16", "read_uint32", "read_uint64",
    "ripemd128",
]
