"""
Tests for path expressions.

Tests cover:
- Parsing into typed segments
- Malformed expressions
- Extraction hits and absent values
"""

import pytest

from relaykit.errors import ConfigurationError, MalformedPathError
from relaykit.oracle.path import (
    ABSENT,
    IndexSegment,
    JsonPath,
    PropertySegment,
    extract,
    parse_path,
)

BLOB = {"abc": [{"def": {"ghi": "hello"}}]}


# =============================================================================
# Parsing
# =============================================================================


class TestParsePath:
    def test_property_segments(self) -> None:
        assert parse_path(".result.ProposeGasPrice") == (
            PropertySegment("result"),
            PropertySegment("ProposeGasPrice"),
        )

    def test_mixed_segments(self) -> None:
        assert parse_path('.abc[0]["def"].ghi') == (
            PropertySegment("abc"),
            IndexSegment(0),
            PropertySegment("def"),
            PropertySegment("ghi"),
        )

    def test_single_quoted_key(self) -> None:
        assert parse_path("['gas-price']") == (PropertySegment("gas-price"),)

    def test_leading_index(self) -> None:
        assert parse_path("[2].fast") == (IndexSegment(2), PropertySegment("fast"))

    @pytest.mark.parametrize(
        "path",
        [
            "abc.def",
            ".abc[noquote]",
            "",
            ".",
            ".abc[",
            ".abc[-1]",
            ".abc[\"unterminated]",
            ".abc[\"mixed']",
            ".abc def",
            ".abc..def",
        ],
    )
    def test_malformed_paths(self, path: str) -> None:
        with pytest.raises(MalformedPathError) as exc_info:
            parse_path(path)

        assert exc_info.value.path == path
        assert str(exc_info.value).endswith(f"invalid path: {path}")

    def test_malformed_path_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_path("abc.def")

    def test_error_reports_position(self) -> None:
        with pytest.raises(MalformedPathError) as exc_info:
            parse_path(".abc[noquote]")
        assert exc_info.value.position == 4


# =============================================================================
# Extraction
# =============================================================================


class TestExtract:
    def test_good_path(self) -> None:
        assert extract(BLOB, '.abc[0]["def"].ghi') == "hello"

    def test_wrong_key_is_absent(self) -> None:
        assert extract(BLOB, '.abc[0]["invalid"].ghi') is ABSENT

    def test_missing_top_level_is_absent(self) -> None:
        assert extract(BLOB, ".missing") is ABSENT

    def test_index_out_of_range_is_absent(self) -> None:
        assert extract(BLOB, ".abc[1]") is ABSENT

    def test_descending_into_scalar_is_absent(self) -> None:
        assert extract(BLOB, '.abc[0]["def"].ghi.jkl') is ABSENT

    def test_property_on_list_is_absent(self) -> None:
        assert extract(BLOB, ".abc.def") is ABSENT

    def test_index_on_mapping_uses_key_text(self) -> None:
        assert extract({"0": "zero"}, "[0]") == "zero"

    def test_root_can_be_a_list(self) -> None:
        assert extract([{"a": 1}, {"a": 2}], "[1].a") == 2

    def test_null_value_is_not_absent(self) -> None:
        assert extract({"a": None}, ".a") is None

    def test_malformed_path_raises_even_without_data(self) -> None:
        with pytest.raises(MalformedPathError):
            extract({}, "abc.def")

    def test_absent_is_falsy_singleton(self) -> None:
        assert not ABSENT
        assert repr(ABSENT) == "ABSENT"
        assert type(ABSENT)() is ABSENT


class TestJsonPath:
    def test_parse_once_extract_many(self) -> None:
        path = JsonPath.parse(".result.ProposeGasPrice")

        assert path.extract({"result": {"ProposeGasPrice": "39"}}) == "39"
        assert path.extract({"result": {}}) is ABSENT
        assert str(path) == ".result.ProposeGasPrice"

    def test_segments_render(self) -> None:
        path = JsonPath.parse('.abc[0]["def"]')
        assert "".join(str(s) for s in path.segments) == '["abc"][0]["def"]'
