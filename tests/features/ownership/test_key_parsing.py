"""Tests for typed key parsing."""

from uuid import UUID

import pytest

from ownership_guard.features.ownership.utils.keys import (
    parse_int_key,
    parse_uuid_key,
    resolve_key_parser,
)

from conftest import DOC1_ID


class TestUuidKeys:
    @pytest.mark.parametrize(
        "raw",
        [
            str(DOC1_ID),
            str(DOC1_ID).upper(),
            DOC1_ID.hex,
            f"{{{DOC1_ID}}}",
            f"  {DOC1_ID}  ",
        ],
    )
    def test_accepted_forms(self, raw):
        assert parse_uuid_key(raw) == DOC1_ID

    @pytest.mark.parametrize("raw", ["not-a-guid", "", "1111", str(DOC1_ID) + "0"])
    def test_rejected_forms(self, raw):
        with pytest.raises(ValueError):
            parse_uuid_key(raw)


class TestIntKeys:
    @pytest.mark.parametrize("raw,expected", [("42", 42), ("-7", -7), ("+3", 3), (" 10 ", 10)])
    def test_accepted_forms(self, raw, expected):
        assert parse_int_key(raw) == expected

    @pytest.mark.parametrize("raw", ["4.2", "1e3", "0x10", "", "ten", "1_000"])
    def test_rejected_forms(self, raw):
        with pytest.raises(ValueError):
            parse_int_key(raw)


class TestResolveKeyParser:
    def test_builtin_types(self):
        assert resolve_key_parser(UUID) is parse_uuid_key
        assert resolve_key_parser(int) is parse_int_key

    def test_other_callables_are_used_directly(self):
        assert resolve_key_parser(str.upper) is str.upper
        assert resolve_key_parser(float)("1.5") == 1.5

    @pytest.mark.parametrize("key_type", [None, "uuid", 42])
    def test_rejects_non_callables(self, key_type):
        with pytest.raises(ValueError):
            resolve_key_parser(key_type)
