"""Unit tests for `-r key=value` request body assembly."""

import pytest

from gapihub.apis.billingbudgets1_beta1 import schemas as budgets
from gapihub.cli.fields import FieldCursor, build_request, request_fields, split_kv
from gapihub.sdk.exceptions import InvalidField


class TestFieldCursor:

    def test_relative_and_absolute(self):
        cursor = FieldCursor()
        cursor.set("budget.amount")
        assert str(cursor) == "budget.amount"
        cursor.set("specified-amount")
        assert str(cursor) == "budget.amount.specified-amount"
        cursor.set(".budget.display-name")
        assert str(cursor) == "budget.display-name"

    def test_double_dot_pops_one_level(self):
        cursor = FieldCursor(["budget", "amount", "specified-amount"])
        cursor.set("..last-period-amount")
        assert str(cursor) == "budget.amount.last-period-amount"

    def test_single_dot_resets(self):
        cursor = FieldCursor(["budget", "amount"])
        cursor.set(".")
        assert str(cursor) == ""

    @pytest.mark.parametrize("key", ["", "budget.", "..x"])
    def test_invalid_moves(self, key):
        with pytest.raises(InvalidField):
            FieldCursor().set(key)


class TestRequestFields:

    def test_paths_and_types(self):
        table = request_fields(budgets.UpdateBudgetRequest)
        assert table["update-mask"].wire_path == ("updateMask",)
        units = table["budget.amount.specified-amount.units"]
        assert units.wire_path == ("budget", "amount", "specifiedAmount", "units")
        assert units.scalar is int
        assert table["budget.budget-filter.projects"].is_list
        assert table["budget.all-updates-rule.disable-default-iam-recipients"].scalar is bool
        assert table["budget.budget-filter.custom-period.start-date.year"].scalar is int

    def test_maps_and_object_lists_are_not_settable(self):
        table = request_fields(budgets.CreateBudgetRequest)
        assert "budget.budget-filter.labels" not in table
        assert not any(key.startswith("budget.threshold-rules") for key in table)


class TestBuildRequest:

    def test_cursor_and_values(self):
        request, problems = build_request(budgets.CreateBudgetRequest, [
            "budget.display-name=Q3",
            "budget.amount.specified-amount",
            "currency-code=USD",
            "units=500",
            ".budget.budget-filter.projects=projects/1",
            ".budget.budget-filter.projects=projects/2",
            ".budget.all-updates-rule.disable-default-iam-recipients=true",
        ])
        assert problems == []
        assert request.budget.display_name == "Q3"
        assert request.budget.amount.specified_amount.currency_code == "USD"
        assert request.budget.amount.specified_amount.units == 500
        assert request.budget.budget_filter.projects == ["projects/1", "projects/2"]
        assert request.budget.all_updates_rule.disable_default_iam_recipients is True

    def test_unknown_field_suggests(self):
        request, problems = build_request(budgets.CreateBudgetRequest, ["budget.display-nam=x"])
        assert request is None
        assert len(problems) == 1
        assert problems[0].suggestion == "display-name"
        assert "did you mean 'display-name'" in str(problems[0])

    def test_bad_values_are_reported(self):
        _, problems = build_request(budgets.CreateBudgetRequest, [
            "budget.amount.specified-amount.nanos=lots",
            "budget.all-updates-rule.disable-default-iam-recipients=yes",
        ])
        assert len(problems) == 2


def test_split_kv():
    assert split_kv("a=b=c") == ("a", "b=c")
    assert split_kv("a=") == ("a", "")
    assert split_kv("a") == ("a", None)
