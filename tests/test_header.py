"""Tests for header parsing and per-file settings."""

import pytest

from mdict_codec.errors import HeaderMissing, InvalidHeader
from mdict_codec.header import (
    HeaderSettings,
    decode_header_text,
    decode_text,
    is_true,
    parse_header,
    read_header_settings,
)
from mdict_codec.keys import Flavor, KeyOrder
from mdict_codec.numeric import NumberWidth


class TestParseHeader:
    """Tests for parse_header."""

    def test_dictionary_element(self):
        attrs = parse_header('<Dictionary KeyCaseSensitive="Yes" Encoding="UTF-16"/>')
        assert attrs == {"KeyCaseSensitive": "Yes", "Encoding": "UTF-16"}
        assert is_true(attrs["KeyCaseSensitive"]) is True

    def test_entities_unescaped(self, index_header):
        attrs = parse_header(index_header)
        assert attrs["Description"] == "A <b>test</b> file"
        assert attrs["Title"] == "Sample"

    def test_library_data_fallback(self):
        attrs = parse_header('<Library_Data Format="Html" Encrypted="No"/>')
        assert attrs == {"Format": "Html", "Encrypted": "No"}

    def test_nested_element(self):
        attrs = parse_header('<Root><Dictionary Title="inner"/></Root>')
        assert attrs == {"Title": "inner"}

    def test_no_header_element(self):
        with pytest.raises(HeaderMissing):
            parse_header('<Something Title="x"/>')

    def test_malformed(self):
        with pytest.raises(HeaderMissing):
            parse_header('<Dictionary Title="x"')


class TestIsTrue:
    """Tests for is_true."""

    def test_truthy(self):
        for value in ("Yes", "yes", "YES", "true", "True"):
            assert is_true(value) is True

    def test_falsy(self):
        for value in ("No", "", "1", "false", None):
            assert is_true(value) is False


class TestDecoding:
    """Tests for decode_text and decode_header_text."""

    def test_header_bytes(self, index_header, index_header_bytes):
        assert decode_header_text(index_header_bytes) == index_header

    def test_header_bytes_not_utf16(self):
        for raw in (b"<\x00D", b"<\x00D\x00\x00\xd8"):
            with pytest.raises(HeaderMissing):
                decode_header_text(raw)
            with pytest.raises(HeaderMissing):
                read_header_settings(raw)

    def test_header_str_passthrough(self):
        assert decode_header_text('<Dictionary/>\r\n') == "<Dictionary/>"

    def test_utf16_is_little_endian(self):
        assert decode_text("ab\x00".encode("utf-16-le"), "UTF-16") == "ab"

    def test_other_encodings(self):
        assert decode_text("词".encode("gb18030"), "GB18030") == "词"
        assert decode_text(b"caf\xc3\xa9\x00", "UTF-8") == "café"


class TestHeaderSettings:
    """Tests for HeaderSettings.from_attributes."""

    def test_modern_index(self, index_header):
        settings = HeaderSettings.from_attributes(parse_header(index_header))
        assert settings.version == 2.0
        assert settings.number_width is NumberWidth.UINT64
        assert settings.encoding == "UTF-8"
        assert settings.key_info_encrypted is True
        assert settings.header_encrypted is False
        assert settings.key_case_sensitive is False
        assert settings.strip_key is True
        assert settings.key_order is KeyOrder.CASE_FOLDING

    def test_legacy_defaults(self):
        settings = HeaderSettings.from_attributes(
            {"GeneratedByEngineVersion": "1.2", "Encoding": "GBK"})
        assert settings.number_width is NumberWidth.UINT32
        assert settings.encoding == "GB18030"
        assert settings.encrypted == 0
        assert settings.strip_key is True

    def test_empty_encoding(self):
        settings = HeaderSettings.from_attributes({"Encoding": ""})
        assert settings.encoding == "UTF-8"
        assert settings.version == 2.0

    def test_case_sensitive(self):
        settings = HeaderSettings.from_attributes(
            {"KeyCaseSensitive": "Yes", "StripKey": "No", "Encrypted": "Yes"})
        assert settings.key_order is KeyOrder.ORDINAL
        assert settings.strip_key is False
        assert settings.header_encrypted is True

    def test_resource(self):
        settings = HeaderSettings.from_attributes({"Encoding": "UTF-8"}, Flavor.RESOURCE)
        assert settings.encoding == "UTF-16"
        assert settings.key_order is KeyOrder.LOCALE

    def test_bad_encrypted(self):
        with pytest.raises(InvalidHeader):
            HeaderSettings.from_attributes({"Encrypted": "maybe"})

    def test_bad_version(self):
        with pytest.raises(HeaderMissing):
            HeaderSettings.from_attributes({"GeneratedByEngineVersion": "two"})

    def test_frozen(self, index_header):
        settings = HeaderSettings.from_attributes(parse_header(index_header))
        with pytest.raises(AttributeError):
            settings.encoding = "UTF-16"

    def test_read_header_settings(self, index_header_bytes):
        settings = read_header_settings(index_header_bytes)
        assert settings.flavor is Flavor.INDEX
        assert settings.key_info_encrypted is True
