# ==================================================
# mdict_codec/header.py
# ==================================================
"""
Header metadata of an MDX/MDD container.

The header is a single XML element, ``<Dictionary …/>`` in current files and
``<Library_Data …/>`` in very old ones, whose attributes hold every global
setting of the file (engine version, encoding, encryption, key ordering).
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from .const import (HEADER_TAGS, TRUTHY, DEFAULT_ENCODING, ENCODING_ALIASES,
                    RESOURCE_ENCODING, MODERN_ENGINE_VERSION)
from .errors import HeaderMissing, InvalidHeader
from .keys import Flavor, KeyOrder, select_key_order
from .numeric import NumberWidth, number_width_for

logger = logging.getLogger(__name__)


def is_true(value: Optional[str]) -> bool:
    """'Yes' / 'true' in any case; everything else, None included, is False."""
    return value is not None and str(value).strip().lower() in TRUTHY


def decode_text(span: bytes, encoding: str) -> str:
    """Decode a text span in the file's encoding, dropping trailing NULs."""
    codec = "utf-16-le" if encoding.upper().replace("_", "-") == "UTF-16" else encoding
    return bytes(span).decode(codec).rstrip("\x00")


def decode_header_text(raw: Union[bytes, str]) -> str:
    """Header bytes are UTF-16LE, NUL-terminated; str passes through."""
    if isinstance(raw, (bytes, bytearray, memoryview)):
        try:
            raw = decode_text(raw, "UTF-16")
        except UnicodeDecodeError as exc:
            raise HeaderMissing(f"header is not UTF-16LE text: {exc}") from exc
    return raw.strip("\x00").strip()


def parse_header(text: str) -> dict[str, str]:
    """
    Return the attributes of the header element as a plain dict.
    Raises HeaderMissing when the markup does not parse or has neither a
    <Dictionary> nor a <Library_Data> element.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise HeaderMissing(f"malformed header markup: {exc}") from exc

    for tag in HEADER_TAGS:
        element = next(root.iter(tag), None)
        if element is not None:
            if tag != HEADER_TAGS[0]:
                logger.debug("no <%s> element, using <%s>", HEADER_TAGS[0], tag)
            return dict(element.attrib)
    raise HeaderMissing(f"header has none of {', '.join(HEADER_TAGS)}")


def _encrypt_flags(value: Optional[str]) -> int:
    if value is None or value == "" or value.lower() == "no":
        return 0
    if value.lower() == "yes":
        return 1
    try:
        return int(value)
    except ValueError as exc:
        raise InvalidHeader(f"unrecognised Encrypted value {value!r}") from exc


def _version(value: Optional[str]) -> float:
    if not value:
        return MODERN_ENGINE_VERSION
    try:
        return float(value)
    except ValueError as exc:
        raise InvalidHeader(f"unrecognised engine version {value!r}") from exc


@dataclass(frozen=True)
class HeaderSettings:
    """Per-file settings; built once when the file is opened."""
    flavor: Flavor
    version: float
    number_width: NumberWidth
    encoding: str
    encrypted: int
    key_case_sensitive: bool
    strip_key: bool
    key_order: KeyOrder

    @property
    def header_encrypted(self) -> bool:
        return bool(self.encrypted & 0x01)

    @property
    def key_info_encrypted(self) -> bool:
        return bool(self.encrypted & 0x02)

    @classmethod
    def from_attributes(cls, attrs: Mapping[str, str],
                        flavor: Flavor = Flavor.INDEX) -> "HeaderSettings":
        version = _version(attrs.get("GeneratedByEngineVersion"))

        encoding = (attrs.get("Encoding") or "").strip() or DEFAULT_ENCODING
        encoding = ENCODING_ALIASES.get(encoding.upper(), encoding)
        if flavor is Flavor.RESOURCE:
            encoding = RESOURCE_ENCODING

        case_sensitive = is_true(attrs.get("KeyCaseSensitive"))
        # writers treat a missing StripKey as "Yes"
        strip = "StripKey" not in attrs or is_true(attrs["StripKey"])

        settings = cls(
            flavor=flavor,
            version=version,
            number_width=number_width_for(version),
            encoding=encoding,
            encrypted=_encrypt_flags(attrs.get("Encrypted")),
            key_case_sensitive=case_sensitive,
            strip_key=strip,
            key_order=select_key_order(case_sensitive, flavor),
        )
        logger.debug("header settings: %s", settings)
        return settings


def read_header_settings(raw: Union[bytes, str],
                         flavor: Flavor = Flavor.INDEX) -> HeaderSettings:
    return HeaderSettings.from_attributes(parse_header(decode_header_text(raw)), flavor)
