"""Tests for request validation."""

from __future__ import annotations

from uuid import UUID

import pytest

from gsdx.domain.errors import InvalidArgsError
from gsdx.domain.validation import (
    MAX_NAME_LEN,
    clamp_page_bounds,
    validate_identifier,
    validate_name,
    validate_optional_name,
    validate_story_id,
)


class TestValidateName:
    def test_trims(self) -> None:
        assert validate_name("  Backlog \n") == "Backlog"

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_empty_rejected(self, raw: str) -> None:
        with pytest.raises(InvalidArgsError, match="name cannot be empty"):
            validate_name(raw)

    def test_max_length_accepted(self) -> None:
        raw = "x" * MAX_NAME_LEN
        assert validate_name(f"  {raw}  ") == raw

    def test_too_long_rejected(self) -> None:
        with pytest.raises(InvalidArgsError, match="name is too long"):
            validate_name("x" * (MAX_NAME_LEN + 1))

    def test_length_counts_characters(self) -> None:
        # 1000 three-byte characters still fit.
        raw = "€" * MAX_NAME_LEN
        assert validate_name(raw) == raw

    def test_param_in_message(self) -> None:
        with pytest.raises(InvalidArgsError) as exc_info:
            validate_name(" ", param="title")
        assert exc_info.value.messages == ["title cannot be empty"]

    def test_optional_none_passes(self) -> None:
        assert validate_optional_name(None) is None

    def test_optional_value_validated(self) -> None:
        assert validate_optional_name(" a ") == "a"
        with pytest.raises(InvalidArgsError):
            validate_optional_name("")


class TestValidateIdentifier:
    def test_trim_and_lowercase(self) -> None:
        raw = "  9B2F6C1E-7D7A-4A53-9D0E-3F1F9E0C2A11 "
        assert validate_identifier(raw) == UUID("9b2f6c1e-7d7a-4a53-9d0e-3f1f9e0c2a11")

    @pytest.mark.parametrize("raw", ["", "not-a-uuid", "9b2f6c1e-7d7a-4a53-9d0e"])
    def test_malformed_rejected(self, raw: str) -> None:
        with pytest.raises(InvalidArgsError):
            validate_identifier(raw)

    def test_story_id_is_uuid(self) -> None:
        value = validate_story_id("9b2f6c1e-7d7a-4a53-9d0e-3f1f9e0c2a11")
        assert isinstance(value, UUID)


class TestClampPageBounds:
    @pytest.mark.parametrize(
        ("cursor", "limit", "expected"),
        [
            (-5, 1000, (1, 100)),
            (3, 0, (3, 10)),
            (0, 10, (1, 10)),
            (7, 55, (7, 55)),
            (1, 100, (1, 100)),
            (1, 101, (1, 100)),
        ],
    )
    def test_clamp(self, cursor: int, limit: int, expected: tuple[int, int]) -> None:
        assert clamp_page_bounds(cursor, limit) == expected
