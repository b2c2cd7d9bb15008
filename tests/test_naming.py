import pytest

from modelgen.codegen.core.naming import (
    is_valid_identifier,
    to_camel_case,
    to_pascal_case,
)


class TestPascalCase:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("user_id", "UserId"),
            ("id", "Id"),
            ("", ""),
            ("created_at", "CreatedAt"),
            ("a__b", "AB"),
            ("_leading", "Leading"),
            ("trailing_", "Trailing"),
            ("URL_path", "URLPath"),
            ("mixedCase_name", "MixedCaseName"),
            ("1st_place", "1stPlace"),
        ],
    )
    def test_conversion(self, raw, expected):
        assert to_pascal_case(raw) == expected

    @pytest.mark.parametrize("raw", ["user_id", "id", "a__b", "UserName", ""])
    def test_idempotent(self, raw):
        once = to_pascal_case(raw)
        assert to_pascal_case(once) == once

    def test_rest_of_fragment_untouched(self):
        assert to_pascal_case("xML_HTTP") == "XMLHTTP"


class TestCamelCase:
    def test_first_fragment_is_capitalized(self):
        assert to_camel_case("user_id") == "UserId"
        assert to_camel_case("id") == "Id"

    @pytest.mark.parametrize("raw", ["user_id", "id", "", "a__b", "created_at"])
    def test_matches_pascal_case(self, raw):
        assert to_camel_case(raw) == to_pascal_case(raw)


class TestHelpers:
    def test_valid_identifier(self):
        assert is_valid_identifier("getUserName")
        assert is_valid_identifier("get$Amount")
        assert not is_valid_identifier("get1st-place")
        assert not is_valid_identifier("")
