"""Chrome Management API v1.

The Chrome Management API is a suite of services that allows Chrome
administrators to view, manage and gain insights on their Chrome OS and
Chrome Browser devices.

Example:
    hub = ChromeManagement(StaticTokenProvider(token))
    app = hub.customers().apps_android_get(
        "customers/my_customer/apps/android/com.google.android.apps.docs"
    ).execute()
"""

from gapihub.sdk.call import MethodSpec
from gapihub.sdk.hub import Hub, Resource

from . import schemas
from .schemas import *  # noqa: F401,F403

# OAuth2 scopes
APPDETAILS_READONLY = "https://www.googleapis.com/auth/chrome.management.appdetails.readonly"
REPORTS_READONLY = "https://www.googleapis.com/auth/chrome.management.reports.readonly"
TELEMETRY_READONLY = "https://www.googleapis.com/auth/chrome.management.telemetry.readonly"

SCOPES = (APPDETAILS_READONLY, REPORTS_READONLY, TELEMETRY_READONLY)

_PAGING = {"page_token": "pageToken", "page_size": "pageSize"}


def _app_get(kind: str) -> MethodSpec:
    return MethodSpec(
        id=f"chromemanagement.customers.apps.{kind}.get",
        http_method="GET",
        path="v1/{+name}",
        path_params=("name",),
        scopes=(APPDETAILS_READONLY,),
        response=schemas.AppDetails,
        description="Get a specific app for a customer by its resource name.",
    )


def _report(method: str, response, query_params: dict, description: str) -> MethodSpec:
    return MethodSpec(
        id=f"chromemanagement.customers.reports.{method}",
        http_method="GET",
        path="v1/{+customer}/reports:" + method,
        path_params=("customer",),
        query_params=query_params,
        scopes=(REPORTS_READONLY,),
        response=response,
        description=description,
    )


CUSTOMERS = {
    "apps_android_get": _app_get("android"),
    "apps_chrome_get": _app_get("chrome"),
    "apps_web_get": _app_get("web"),
    "apps_count_chrome_app_requests": MethodSpec(
        id="chromemanagement.customers.apps.countChromeAppRequests",
        http_method="GET",
        path="v1/{+customer}/apps:countChromeAppRequests",
        path_params=("customer",),
        query_params={**_PAGING, "org_unit_id": "orgUnitId", "order_by": "orderBy"},
        scopes=(APPDETAILS_READONLY,),
        response=schemas.CountChromeAppRequestsResponse,
        description="Generate summary of app installation requests.",
    ),
    "reports_count_chrome_devices_reaching_auto_expiration_date": _report(
        "countChromeDevicesReachingAutoExpirationDate",
        schemas.CountChromeDevicesReachingAutoExpirationDateResponse,
        {"org_unit_id": "orgUnitId", "min_aue_date": "minAueDate", "max_aue_date": "maxAueDate"},
        "Generate report of the number of devices expiring in each month of the selected time frame.",
    ),
    "reports_count_chrome_devices_that_need_attention": _report(
        "countChromeDevicesThatNeedAttention",
        schemas.CountChromeDevicesThatNeedAttentionResponse,
        {"read_mask": "readMask", "org_unit_id": "orgUnitId"},
        "Counts of ChromeOS devices that have not synced policies or have lacked user activity in the past 28 days.",
    ),
    "reports_count_chrome_hardware_fleet_devices": _report(
        "countChromeHardwareFleetDevices",
        schemas.CountChromeHardwareFleetDevicesResponse,
        {"read_mask": "readMask", "org_unit_id": "orgUnitId"},
        "Counts of devices with a specific hardware specification from the requested hardware type.",
    ),
    "reports_count_chrome_versions": _report(
        "countChromeVersions",
        schemas.CountChromeVersionsResponse,
        {**_PAGING, "org_unit_id": "orgUnitId", "filter": "filter"},
        "Generate report of installed Chrome versions.",
    ),
    "reports_count_installed_apps": _report(
        "countInstalledApps",
        schemas.CountInstalledAppsResponse,
        {**_PAGING, "org_unit_id": "orgUnitId", "order_by": "orderBy", "filter": "filter"},
        "Generate report of app installations.",
    ),
    "reports_find_installed_app_devices": _report(
        "findInstalledAppDevices",
        schemas.FindInstalledAppDevicesResponse,
        {**_PAGING, "org_unit_id": "orgUnitId", "order_by": "orderBy", "filter": "filter",
         "app_type": "appType", "app_id": "appId"},
        "Generate report of devices that have a specified app installed.",
    ),
    "telemetry_devices_get": MethodSpec(
        id="chromemanagement.customers.telemetry.devices.get",
        http_method="GET",
        path="v1/{+name}",
        path_params=("name",),
        query_params={"read_mask": "readMask"},
        scopes=(TELEMETRY_READONLY,),
        response=schemas.TelemetryDevice,
        description="Get telemetry device.",
    ),
    "telemetry_devices_list": MethodSpec(
        id="chromemanagement.customers.telemetry.devices.list",
        http_method="GET",
        path="v1/{+parent}/telemetry/devices",
        path_params=("parent",),
        query_params={"read_mask": "readMask", **_PAGING, "filter": "filter"},
        scopes=(TELEMETRY_READONLY,),
        response=schemas.ListTelemetryDevicesResponse,
        description="List all telemetry devices.",
    ),
    "telemetry_events_list": MethodSpec(
        id="chromemanagement.customers.telemetry.events.list",
        http_method="GET",
        path="v1/{+parent}/telemetry/events",
        path_params=("parent",),
        query_params={"read_mask": "readMask", **_PAGING, "filter": "filter"},
        scopes=(TELEMETRY_READONLY,),
        response=schemas.ListTelemetryEventsResponse,
        description="List telemetry events.",
    ),
}


class ChromeManagement(Hub):
    """Central instance to access all Chrome Management resources."""

    NAME = "chromemanagement"
    VERSION = "v1"
    TITLE = "Chrome Management API"
    BASE_URL = "https://chromemanagement.googleapis.com/"
    ROOT_URL = "https://chromemanagement.googleapis.com/"
    RESOURCES = {"customers": CUSTOMERS}

    def customers(self) -> Resource:
        return self.resource("customers")
