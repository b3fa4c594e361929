# ==================================================
# mdict_codec/errors.py
# ==================================================

class MdictError(Exception):
    """Base class for every error raised by mdict_codec."""


class InvalidArgument(MdictError, ValueError):
    """A comparator got an empty or missing key."""


class TruncatedSpan(MdictError, ValueError):
    """A byte span is shorter than the value read from it."""


class HeaderMissing(MdictError, ValueError):
    """No usable <Dictionary>/<Library_Data> element in the header."""


class InvalidHeader(HeaderMissing):
    """The header element exists but an attribute cannot be interpreted."""
