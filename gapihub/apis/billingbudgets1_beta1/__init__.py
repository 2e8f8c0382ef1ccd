"""Cloud Billing Budget API v1beta1.

The Cloud Billing Budget API stores Cloud Billing budgets, which define a
budget plan and the rules to execute as spend is tracked against that plan.

Example:
    hub = CloudBillingBudget(token_provider_from_config())
    created = hub.billing_accounts().budgets_create(
        {"budget": {"displayName": "Q3", "amount": {"specifiedAmount": {"currencyCode": "USD", "units": "500"}}}},
        "billingAccounts/000000-111111-222222",
    ).execute()
"""

from gapihub.sdk.call import MethodSpec
from gapihub.sdk.hub import Hub, Resource
from gapihub.sdk.schema import Empty

from . import schemas
from .schemas import *  # noqa: F401,F403

# OAuth2 scopes
CLOUD_BILLING = "https://www.googleapis.com/auth/cloud-billing"
CLOUD_PLATFORM = "https://www.googleapis.com/auth/cloud-platform"

SCOPES = (CLOUD_BILLING, CLOUD_PLATFORM)

BILLING_ACCOUNTS = {
    "budgets_create": MethodSpec(
        id="billingbudgets.billingAccounts.budgets.create",
        http_method="POST",
        path="v1beta1/{+parent}/budgets",
        path_params=("parent",),
        request=schemas.CreateBudgetRequest,
        scopes=(CLOUD_PLATFORM,),
        response=schemas.Budget,
        description="Creates a new budget.",
    ),
    "budgets_delete": MethodSpec(
        id="billingbudgets.billingAccounts.budgets.delete",
        http_method="DELETE",
        path="v1beta1/{+name}",
        path_params=("name",),
        scopes=(CLOUD_PLATFORM,),
        response=Empty,
        description="Deletes a budget. Returns successfully if already deleted.",
    ),
    "budgets_get": MethodSpec(
        id="billingbudgets.billingAccounts.budgets.get",
        http_method="GET",
        path="v1beta1/{+name}",
        path_params=("name",),
        scopes=(CLOUD_PLATFORM,),
        response=schemas.Budget,
        description="Returns a budget.",
    ),
    "budgets_list": MethodSpec(
        id="billingbudgets.billingAccounts.budgets.list",
        http_method="GET",
        path="v1beta1/{+parent}/budgets",
        path_params=("parent",),
        query_params={"page_token": "pageToken", "page_size": "pageSize"},
        scopes=(CLOUD_PLATFORM,),
        response=schemas.ListBudgetsResponse,
        description="Returns a list of budgets for a billing account.",
    ),
    "budgets_patch": MethodSpec(
        id="billingbudgets.billingAccounts.budgets.patch",
        http_method="PATCH",
        path="v1beta1/{+name}",
        path_params=("name",),
        request=schemas.UpdateBudgetRequest,
        scopes=(CLOUD_PLATFORM,),
        response=schemas.Budget,
        description="Updates a budget and returns the updated budget.",
    ),
}


class CloudBillingBudget(Hub):
    """Central instance to access all Cloud Billing Budget resources."""

    NAME = "billingbudgets"
    VERSION = "v1beta1"
    TITLE = "Cloud Billing Budget API"
    BASE_URL = "https://billingbudgets.googleapis.com/"
    ROOT_URL = "https://billingbudgets.googleapis.com/"
    RESOURCES = {"billing_accounts": BILLING_ACCOUNTS}

    def billing_accounts(self) -> Resource:
        return self.resource("billing_accounts")
