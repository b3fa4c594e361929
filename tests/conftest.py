"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def index_header():
    """Header element of a typical case-insensitive MDX file."""
    return ('<Dictionary GeneratedByEngineVersion="2.0" RequiredEngineVersion="2.0" '
            'Encrypted="2" Encoding="UTF-8" Format="Html" KeyCaseSensitive="No" '
            'StripKey="Yes" Title="Sample" Description="A &lt;b&gt;test&lt;/b&gt; file"/>')


@pytest.fixture
def index_header_bytes(index_header):
    """The same header as it sits on disk: UTF-16LE, NUL-terminated."""
    return (index_header + "\r\n\x00").encode("utf-16-le")


@pytest.fixture
def sample_keys():
    """Keys mixing case, punctuation and prefixes."""
    return ["apple", "Apple", "APPLE", "app", "apply", "Banana", "band",
            "a-b", "a.b", "zebra", "Zebra", "z"]
