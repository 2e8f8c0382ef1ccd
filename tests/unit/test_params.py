"""Unit tests for parameter assembly and URL templating."""

from urllib.parse import unquote

import pytest

from gapihub.sdk.exceptions import FieldClash
from gapihub.sdk.params import Params, check_field_clash, expand_template, percent_encode


class TestParams:

    def test_push_keeps_order_and_repeats_lists(self):
        params = Params().push("a", "1").push("b", ["x", "y"]).push("c", None)
        assert list(params) == [("a", "1"), ("b", "x"), ("b", "y")]
        assert params.get_all("b") == ["x", "y"]
        assert "c" not in params

    def test_booleans_are_lowercase(self):
        params = Params().push("prettyPrint", False)
        assert params.get("prettyPrint") == "false"

    def test_remove(self):
        params = Params().push("name", "n").push("alt", "json").remove(["name"])
        assert list(params) == [("alt", "json")]


class TestFieldClash:

    def test_clash_names_the_field(self):
        with pytest.raises(FieldClash) as exc_info:
            check_field_clash(["alt", "name", "readMask"], {"readMask": "x"})
        assert exc_info.value.field == "readMask"

    def test_no_clash(self):
        check_field_clash(["alt", "name"], {"fields": "name", "quotaUser": "me"})


class TestExpandTemplate:

    def test_reserved_expansion_keeps_slashes(self):
        params = Params().push("name", "customers/my_customer/apps/android/com.foo").push("alt", "json")
        url = expand_template("https://x.googleapis.com/", "v1/{+name}", params, ["name"])
        assert url == "https://x.googleapis.com/v1/customers/my_customer/apps/android/com.foo?alt=json"

    def test_path_param_removed_from_query(self):
        params = Params().push("customer", "customers/c1").push("pageSize", 5).push("alt", "json")
        url = expand_template("https://x/", "v1/{+customer}/apps:count", params, ["customer"])
        assert url == "https://x/v1/customers/c1/apps:count?pageSize=5&alt=json"
        assert "customer" not in params

    def test_simple_expansion_encodes_slashes(self):
        params = Params().push("id", "a/b")
        url = expand_template("https://x/", "v1/items/{id}", params, ["id"])
        assert url == "https://x/v1/items/a%2Fb"

    @pytest.mark.parametrize("value", ["with space", "50%", "q?x#frag", "ünï"])
    def test_reserved_encoding_round_trips(self, value):
        encoded = percent_encode(value, reserved=True)
        assert " " not in encoded and "?" not in encoded and "#" not in encoded
        assert unquote(encoded) == value

    def test_multi_valued_query(self):
        params = Params().push("projects", ["p1", "p2"])
        assert params.parse_with_url("https://x/") == "https://x/?projects=p1&projects=p2"
