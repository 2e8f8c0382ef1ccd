"""Cloud Billing Budget API v1beta1 schemas."""

from typing import Any, Dict, List, Optional

from gapihub.sdk.schema import GoogleTypeDate, GoogleTypeMoney, Schema


class AllUpdatesRule(Schema):
    """Actions to take when the budget is updated (notifications)."""
    disable_default_iam_recipients: Optional[bool] = None
    monitoring_notification_channels: Optional[List[str]] = None
    pubsub_topic: Optional[str] = None
    schema_version: Optional[str] = None


class LastPeriodAmount(Schema):
    """Use the last period's actual spend as the budget amount."""
    pass


class BudgetAmount(Schema):
    last_period_amount: Optional[LastPeriodAmount] = None
    specified_amount: Optional[GoogleTypeMoney] = None


class CustomPeriod(Schema):
    end_date: Optional[GoogleTypeDate] = None
    start_date: Optional[GoogleTypeDate] = None


class Filter(Schema):
    """Which costs are tracked by the budget."""
    calendar_period: Optional[str] = None
    credit_types: Optional[List[str]] = None
    credit_types_treatment: Optional[str] = None
    custom_period: Optional[CustomPeriod] = None
    labels: Optional[Dict[str, List[Any]]] = None
    projects: Optional[List[str]] = None
    services: Optional[List[str]] = None
    subaccounts: Optional[List[str]] = None


class ThresholdRule(Schema):
    spend_basis: Optional[str] = None
    threshold_percent: Optional[float] = None


class Budget(Schema):
    """A budget is a plan that describes what you expect to spend on Cloud
    projects, plus the rules to execute as spend is tracked against that plan.
    """
    all_updates_rule: Optional[AllUpdatesRule] = None
    amount: Optional[BudgetAmount] = None
    budget_filter: Optional[Filter] = None
    display_name: Optional[str] = None
    etag: Optional[str] = None
    name: Optional[str] = None
    threshold_rules: Optional[List[ThresholdRule]] = None


class CreateBudgetRequest(Schema):
    budget: Optional[Budget] = None


class UpdateBudgetRequest(Schema):
    budget: Optional[Budget] = None
    # comma-separated field mask, e.g. "displayName,amount"
    update_mask: Optional[str] = None


class ListBudgetsResponse(Schema):
    budgets: Optional[List[Budget]] = None
    next_page_token: Optional[str] = None
