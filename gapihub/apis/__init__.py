"""Per-API hubs.

`HUBS` maps the command line name of each API to its hub class.
"""

from .billingbudgets1_beta1 import CloudBillingBudget
from .chromemanagement1 import ChromeManagement
from .customsearch1 import CustomSearchAPI

HUBS = {
    "billingbudgets1-beta1": CloudBillingBudget,
    "chromemanagement1": ChromeManagement,
    "customsearch1": CustomSearchAPI,
}

__all__ = ["HUBS", "CloudBillingBudget", "ChromeManagement", "CustomSearchAPI"]
