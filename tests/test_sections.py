from __future__ import annotations

import pytest

from lasso import Descriptor, HeaderRecord, LassoError, UnknownSectionError, create_header, section_prefix
from lasso.header import SECTION_PREFIXES


@pytest.mark.parametrize(
    "header_type,prefix",
    [
        ("VERSION", "~V"),
        ("WELL", "~W"),
        ("CURVE", "~C"),
        ("PARAMETER", "~P"),
        ("OTHER", "~O"),
    ],
)
def test_standard_sections(header_type, prefix):
    assert SECTION_PREFIXES[header_type] == prefix
    assert section_prefix(header_type) == prefix


def test_section_prefix_ignores_case_and_whitespace():
    assert section_prefix("well") == "~W"
    assert section_prefix(" Curve ") == "~C"


def test_section_prefix_unknown_is_none():
    assert section_prefix("ASCII") is None


def test_create_header_looks_up_prefix():
    header = create_header("well", descriptors=[Descriptor("STRT")])

    assert isinstance(header, HeaderRecord)
    assert header.get_type() == "well"
    assert header.get_prefix() == "~W"
    assert header.descriptor_names() == ["STRT"]


def test_create_header_unknown_section_raises():
    with pytest.raises(UnknownSectionError) as excinfo:
        create_header("FOO")

    assert isinstance(excinfo.value, LassoError)
    assert isinstance(excinfo.value, ValueError)
    assert "FOO" in str(excinfo.value)


def test_create_header_explicit_prefix_for_any_type():
    header = create_header("FOO", prefix="~F")

    assert header.get_prefix() == "~F"
    assert header.get_descriptors() == []


def test_create_header_explicit_prefix_is_not_validated():
    header = create_header("WELL", prefix="~X")

    assert header.get_prefix() == "~X"
