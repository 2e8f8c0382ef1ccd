"""
Unit tests for the generic call pipeline.

Every test drives a real hub against the scripted FakeTransport from
conftest.py, so URL assembly, headers, retries and decoding all run for
real; only the network is replaced.
"""

import dataclasses
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

import pytest
import requests

from gapihub.apis.billingbudgets1_beta1 import CloudBillingBudget
from gapihub.apis.chromemanagement1 import (
    APPDETAILS_READONLY, ChromeManagement, TELEMETRY_READONLY,
)
from gapihub.sdk.auth import StaticTokenProvider, TokenProvider
from gapihub.sdk.delegate import Delegate, PolicyDelegate, Retry, RetryPolicy, retry_after_seconds
from gapihub.sdk.exceptions import (
    BadRequest, Cancelled, Failure, FieldClash, HttpError, JsonDecodeError,
    MissingAPIKey, MissingToken, UploadSizeLimitExceeded,
)
from gapihub.sdk.schema import Empty

BASE = "https://chromemanagement.googleapis.com/"
APP_NAME = "customers/my_customer/apps/android/com.foo"


class RecordingProvider(TokenProvider):
    def __init__(self, token="tok", error=None):
        self.token = token
        self.error = error
        self.requested = []

    def get_token(self, scopes):
        self.requested.append(tuple(scopes))
        if self.error is not None:
            raise self.error
        return self.token


class RecordingDelegate(Delegate):
    """Retries `retries` times, then gives the scripted final decision."""

    def __init__(self, retries=0, final=Retry.ABORT, token=None):
        self.retries = retries
        self.final = final
        self.override_token = token
        self.events = []

    def _decide(self):
        if self.retries > 0:
            self.retries -= 1
            return Retry.after(0.5)
        return self.final

    def begin(self, info):
        self.events.append(("begin", info.id))

    def token(self, error):
        self.events.append(("token", str(error)))
        return self.override_token

    def pre_request(self):
        self.events.append(("pre_request",))

    def http_error(self, error):
        self.events.append(("http_error",))
        return self._decide()

    def http_failure(self, response, server_error):
        self.events.append(("http_failure", response.status_code, server_error is not None))
        return self._decide()

    def response_json_decode_error(self, body, error):
        self.events.append(("decode_error", body))

    def finished(self, is_success):
        self.events.append(("finished", is_success))


@pytest.fixture
def chrome(fake_transport, make_response, no_sleep):
    """Factory building a ChromeManagement hub over scripted responses."""
    def factory(*outcomes, auth=None, api_key=None):
        transport = fake_transport(*outcomes)
        hub = ChromeManagement(auth or StaticTokenProvider("tok"), transport=transport,
                               api_key=api_key, sleep=no_sleep)
        return hub, transport
    return factory


class TestRequestAssembly:

    def test_android_app_get_end_to_end(self, chrome, make_response):
        hub, transport = chrome(make_response(200, {"name": APP_NAME, "displayName": "Foo",
                                                    "reviewNumber": "42"}))

        app = hub.customers().apps_android_get(APP_NAME).execute()

        assert transport.call_count == 1
        sent = transport.last
        assert sent["method"] == "GET"
        assert sent["url"] == BASE + "v1/customers/my_customer/apps/android/com.foo?alt=json"
        assert sent["headers"]["Authorization"] == "Bearer tok"
        assert sent["headers"]["User-Agent"].startswith("gapihub/")
        assert sent["data"] is None
        assert app.display_name == "Foo"
        assert app.review_number == 42

    def test_query_params_precede_additional_params_and_alt(self, chrome):
        hub, transport = chrome()

        (hub.customers()
            .reports_count_installed_apps("customers/c1", page_size=10, org_unit_id="ou1")
            .param("fields", "installedApps")
            .execute())

        assert transport.last["url"] == (
            BASE + "v1/customers/c1/reports:countInstalledApps"
            "?pageSize=10&orgUnitId=ou1&fields=installedApps&alt=json")

    def test_set_after_construction(self, chrome):
        hub, transport = chrome()

        hub.customers().telemetry_devices_list("customers/c1").set(read_mask="name,cpuInfo").execute()

        assert transport.last["url"] == BASE + "v1/customers/c1/telemetry/devices?readMask=name%2CcpuInfo&alt=json"

    def test_unknown_keyword_is_type_error(self, chrome):
        hub, _ = chrome()
        with pytest.raises(TypeError):
            hub.customers().apps_android_get(APP_NAME, page_size=3)

    def test_missing_path_param_is_type_error(self, chrome):
        hub, _ = chrome()
        with pytest.raises(TypeError):
            hub.customers().apps_android_get()

    def test_none_path_param_is_rejected_before_sending(self, chrome):
        hub, transport = chrome()
        with pytest.raises(TypeError, match="'name' must not be None"):
            hub.customers().apps_android_get(None).execute()
        with pytest.raises(TypeError):
            hub.customers().apps_android_get(name=None)

        assert transport.call_count == 0

    def test_base_url_override(self, chrome):
        hub, transport = chrome()
        previous = hub.set_base_url("http://localhost:8080/")

        hub.customers().apps_web_get("customers/c/apps/web/x").execute()

        assert previous == BASE
        assert transport.last["url"].startswith("http://localhost:8080/v1/customers/c/apps/web/x")

    def test_call_executes_only_once(self, chrome):
        hub, _ = chrome()
        call = hub.customers().apps_chrome_get("customers/c/apps/chrome/abc")
        call.execute()
        with pytest.raises(RuntimeError):
            call.execute()


class TestFieldClash:

    def test_clash_with_method_param_sends_nothing(self, chrome):
        hub, transport = chrome()
        dlg = RecordingDelegate()

        with pytest.raises(FieldClash) as exc_info:
            (hub.customers().telemetry_devices_get("customers/c/telemetry/devices/d")
                .param("readMask", "name").delegate(dlg).execute())

        assert exc_info.value.field == "readMask"
        assert transport.call_count == 0
        assert dlg.events[-1] == ("finished", False)

    @pytest.mark.parametrize("field", ["alt", "name"])
    def test_clash_with_builtin_fields(self, chrome, field):
        hub, transport = chrome()
        with pytest.raises(FieldClash):
            hub.customers().apps_android_get(APP_NAME).param(field, "x").execute()
        assert transport.call_count == 0


class TestScopes:

    def test_default_scope_is_requested(self, chrome):
        provider = RecordingProvider()
        hub, _ = chrome(auth=provider)

        hub.customers().apps_android_get(APP_NAME).execute()
        events_call = hub.customers().telemetry_events_list("customers/c")
        events_call.execute()

        assert provider.requested == [(APPDETAILS_READONLY,), (TELEMETRY_READONLY,)]

    def test_add_scope_replaces_default(self, chrome):
        provider = RecordingProvider()
        hub, _ = chrome(auth=provider)

        hub.customers().apps_android_get(APP_NAME).add_scope("https://example.com/a").execute()

        assert provider.requested == [("https://example.com/a",)]

    def test_cleared_scopes_need_api_key(self, chrome):
        provider = RecordingProvider()
        hub, transport = chrome(auth=provider)

        with pytest.raises(MissingAPIKey):
            hub.customers().apps_android_get(APP_NAME).clear_scopes().execute()

        assert transport.call_count == 0
        assert provider.requested == []

    def test_cleared_scopes_use_hub_api_key(self, chrome):
        provider = RecordingProvider()
        hub, transport = chrome(auth=provider, api_key="AIzaKey")

        hub.customers().apps_android_get(APP_NAME).clear_scopes().execute()

        assert transport.last["url"].endswith("?alt=json&key=AIzaKey")
        assert "Authorization" not in transport.last["headers"]
        assert provider.requested == []

    def test_explicit_key_param_wins(self, chrome):
        hub, transport = chrome(api_key="AIzaHub")

        hub.customers().apps_android_get(APP_NAME).clear_scopes().param("key", "AIzaMine").execute()

        assert "key=AIzaMine" in transport.last["url"]
        assert "AIzaHub" not in transport.last["url"]


class TestTokens:

    def test_token_failure_is_missing_token(self, chrome):
        provider = RecordingProvider(error=RuntimeError("no credentials"))
        hub, transport = chrome(auth=provider)

        with pytest.raises(MissingToken) as exc_info:
            hub.customers().apps_android_get(APP_NAME).execute()

        assert "no credentials" in str(exc_info.value)
        assert transport.call_count == 0

    def test_delegate_supplies_token(self, chrome):
        provider = RecordingProvider(error=RuntimeError("expired"))
        hub, transport = chrome(auth=provider)
        dlg = RecordingDelegate(token="from-delegate")

        hub.customers().apps_android_get(APP_NAME).delegate(dlg).execute()

        assert transport.last["headers"]["Authorization"] == "Bearer from-delegate"
        assert ("token", "expired") in dlg.events


class TestFailures:

    def test_error_envelope_is_bad_request(self, chrome, make_response):
        body = {"error": {"code": 404, "message": "App not found", "status": "NOT_FOUND"}}
        hub, transport = chrome(make_response(404, body))

        with pytest.raises(BadRequest) as exc_info:
            hub.customers().apps_android_get(APP_NAME).execute()

        err = exc_info.value
        assert err.code == 404
        assert err.status == "NOT_FOUND"
        assert err.message == "App not found"
        assert transport.call_count == 1

    def test_unstructured_body_is_failure(self, chrome, make_response):
        hub, _ = chrome(make_response(502, "<html>bad gateway</html>", headers={"Content-Type": "text/html"}))

        with pytest.raises(Failure) as exc_info:
            hub.customers().apps_android_get(APP_NAME).execute()

        assert exc_info.value.status_code == 502

    def test_default_delegate_does_not_retry(self, chrome, make_response):
        hub, transport = chrome(make_response(503, {"error": {"code": 503, "message": "busy"}}))

        with pytest.raises(BadRequest):
            hub.customers().apps_android_get(APP_NAME).execute()

        assert transport.call_count == 1

    def test_transport_error_is_http_error(self, chrome):
        hub, transport = chrome(requests.ConnectionError("connection refused"))

        with pytest.raises(HttpError) as exc_info:
            hub.customers().apps_android_get(APP_NAME).execute()

        assert isinstance(exc_info.value.error, requests.ConnectionError)
        assert transport.call_count == 1

    def test_unexpected_transport_exception_still_finishes(self, chrome):
        hub, transport = chrome(ValueError("boom"))
        dlg = RecordingDelegate(retries=3)

        with pytest.raises(ValueError, match="boom"):
            hub.customers().apps_android_get(APP_NAME).delegate(dlg).execute()

        assert transport.call_count == 1
        assert ("http_error",) not in dlg.events
        assert dlg.events.count(("finished", False)) == 1
        assert dlg.events[-1] == ("finished", False)

    @pytest.mark.parametrize("hook", ["http_error", "http_failure"])
    def test_hook_without_decision_is_type_error(self, chrome, make_response, hook):
        outcome = requests.Timeout("slow") if hook == "http_error" else make_response(500, "oops")
        hub, transport = chrome(outcome)

        class Silent(RecordingDelegate):
            def http_error(self, error):
                self.events.append(("http_error",))

            def http_failure(self, response, server_error):
                self.events.append(("http_failure",))

        dlg = Silent()
        with pytest.raises(TypeError, match=f"Delegate.{hook} must return a Retry"):
            hub.customers().apps_android_get(APP_NAME).delegate(dlg).execute()

        assert transport.call_count == 1
        assert dlg.events[-1] == ("finished", False)

    def test_decode_error_is_not_retried(self, chrome, make_response):
        hub, transport = chrome(make_response(200, "this is not json"))
        dlg = RecordingDelegate(retries=5)

        with pytest.raises(JsonDecodeError) as exc_info:
            hub.customers().apps_android_get(APP_NAME).delegate(dlg).execute()

        assert exc_info.value.body == "this is not json"
        assert transport.call_count == 1
        assert ("decode_error", "this is not json") in dlg.events
        assert dlg.events[-1] == ("finished", False)

    def test_cancel_ends_with_cancelled(self, chrome, make_response):
        hub, transport = chrome(make_response(500, {"error": {"code": 500, "message": "x"}}))
        dlg = RecordingDelegate(final=Retry.CANCEL)

        with pytest.raises(Cancelled):
            hub.customers().apps_android_get(APP_NAME).delegate(dlg).execute()

        assert transport.call_count == 1


class TestRetries:

    @pytest.mark.parametrize("retries", [1, 3])
    def test_n_retries_mean_n_plus_one_requests(self, chrome, make_response, no_sleep, retries):
        failure = make_response(503, {"error": {"code": 503, "message": "busy"}})
        hub, transport = chrome(failure)
        dlg = RecordingDelegate(retries=retries)

        with pytest.raises(BadRequest):
            hub.customers().apps_android_get(APP_NAME).delegate(dlg).execute()

        assert transport.call_count == retries + 1
        assert no_sleep.delays == [0.5] * retries
        assert dlg.events.count(("pre_request",)) == retries + 1
        assert dlg.events[0] == ("begin", "chromemanagement.customers.apps.android.get")
        assert dlg.events[-1] == ("finished", False)

    @pytest.mark.parametrize("failures", [0, 1, 4])
    def test_retry_after_transport_error_then_success(self, chrome, make_response, no_sleep, failures):
        outcomes = [requests.Timeout("slow")] * failures + [make_response(200, {"displayName": "ok"})]
        hub, transport = chrome(*outcomes)
        dlg = RecordingDelegate(retries=failures)

        app = hub.customers().apps_android_get(APP_NAME).delegate(dlg).execute()

        assert app.display_name == "ok"
        assert transport.call_count == failures + 1
        assert dlg.events.count(("http_error",)) == failures
        assert no_sleep.delays == [0.5] * failures
        assert dlg.events.count(("finished", True)) == 1
        assert dlg.events[-1] == ("finished", True)

    def test_policy_delegate_backs_off(self, chrome, make_response, no_sleep):
        busy = make_response(503, {"error": {"code": 503, "message": "busy"}})
        hub, transport = chrome(busy, busy, make_response(200, {"displayName": "ok"}))
        policy = RetryPolicy(max_attempts=3, initial_backoff=1.0, jitter=False)

        hub.customers().apps_android_get(APP_NAME).delegate(PolicyDelegate(policy)).execute()

        assert transport.call_count == 3
        assert no_sleep.delays == [1.0, 2.0]

    def test_policy_delegate_stops_at_max_attempts(self, chrome, make_response):
        hub, transport = chrome(make_response(500, "oops"))
        policy = RetryPolicy(max_attempts=2, jitter=False)

        with pytest.raises(Failure):
            hub.customers().apps_android_get(APP_NAME).delegate(PolicyDelegate(policy)).execute()

        assert transport.call_count == 2

    def test_policy_delegate_honors_retry_after(self, chrome, make_response, no_sleep):
        limited = make_response(429, {"error": {"code": 429, "message": "slow down"}},
                                headers={"Retry-After": "7"})
        hub, _ = chrome(limited, make_response(200, {}))

        hub.customers().apps_android_get(APP_NAME).delegate(PolicyDelegate(RetryPolicy(jitter=False))).execute()

        assert no_sleep.delays == [7.0]

    def test_policy_delegate_honors_retry_after_date(self, chrome, make_response, no_sleep):
        when = format_datetime(datetime.now(timezone.utc) + timedelta(seconds=120), usegmt=True)
        limited = make_response(503, {"error": {"code": 503, "message": "busy"}},
                                headers={"Retry-After": when})
        hub, _ = chrome(limited, make_response(200, {}))

        hub.customers().apps_android_get(APP_NAME).delegate(PolicyDelegate(RetryPolicy(jitter=False))).execute()

        assert len(no_sleep.delays) == 1
        assert 100 < no_sleep.delays[0] <= 120

    def test_policy_delegate_does_not_retry_client_errors(self, chrome, make_response):
        hub, transport = chrome(make_response(400, {"error": {"code": 400, "message": "bad"}}))

        with pytest.raises(BadRequest):
            hub.customers().apps_android_get(APP_NAME).delegate(PolicyDelegate()).execute()

        assert transport.call_count == 1


class TestRetryPolicy:

    def test_backoff_without_jitter_doubles_up_to_max(self):
        policy = RetryPolicy(initial_backoff=0.5, max_backoff=3.0, jitter=False)
        assert [policy.backoff(n) for n in range(1, 6)] == [0.5, 1.0, 2.0, 3.0, 3.0]

    def test_backoff_with_jitter_stays_below_ceiling(self):
        policy = RetryPolicy(initial_backoff=1.0, max_backoff=4.0)
        for retry_number, ceiling in [(1, 1.0), (2, 2.0), (3, 4.0), (8, 4.0)]:
            for _ in range(20):
                assert 0 <= policy.backoff(retry_number) <= ceiling

    def test_retry_after_forms(self, make_response):
        def header(value):
            return retry_after_seconds(make_response(503, "", headers={"Retry-After": value}))

        past = format_datetime(datetime.now(timezone.utc) - timedelta(hours=1), usegmt=True)
        assert header("3") == 3.0
        assert header("-2") == 0.0
        assert header(past) == 0.0
        assert header("soon") is None
        assert retry_after_seconds(make_response(503, "")) is None


class TestRequestBodies:

    @pytest.fixture
    def budgets(self, fake_transport, make_response, no_sleep):
        def factory(*outcomes):
            transport = fake_transport(*outcomes)
            hub = CloudBillingBudget(StaticTokenProvider("tok"), transport=transport, sleep=no_sleep)
            return hub, transport
        return factory

    def test_create_sends_json_body(self, budgets, make_response):
        hub, transport = budgets(make_response(200, {"name": "billingAccounts/A/budgets/b1", "displayName": "Q3"}))

        budget = hub.billing_accounts().budgets_create(
            {"budget": {"displayName": "Q3", "amount": {"specifiedAmount": {"currencyCode": "USD", "units": "500"}}}},
            "billingAccounts/A",
        ).execute()

        sent = transport.last
        assert sent["method"] == "POST"
        assert sent["url"] == "https://billingbudgets.googleapis.com/v1beta1/billingAccounts/A/budgets?alt=json"
        assert sent["headers"]["Content-Type"] == "application/json"
        assert b'"displayName": "Q3"' in sent["data"]
        assert b'"units": "500"' in sent["data"]
        assert budget.name == "billingAccounts/A/budgets/b1"

    def test_delete_with_empty_body(self, budgets, make_response):
        hub, transport = budgets(make_response(200, ""))

        result = hub.billing_accounts().budgets_delete("billingAccounts/A/budgets/b1").execute()

        assert isinstance(result, Empty)
        assert transport.last["method"] == "DELETE"

    def test_upload_size_limit(self, budgets):
        hub, transport = budgets()
        spec = dataclasses.replace(hub.RESOURCES["billing_accounts"]["budgets_create"], max_upload_size=16)

        with pytest.raises(UploadSizeLimitExceeded) as exc_info:
            hub.call(spec, {"budget": {"displayName": "a name longer than sixteen bytes"}},
                     "billingAccounts/A").execute()

        assert exc_info.value.limit == 16
        assert transport.call_count == 0


class TestHubSettings:

    def test_user_agent_and_raw_response(self, chrome, make_response):
        hub, transport = chrome(make_response(200, {"displayName": "x"}, headers={"X-Trace": "abc"}))
        assert hub.set_user_agent("my-tool/1.0").startswith("gapihub/")
        previous_root = hub.set_root_url("http://root/")

        response, app = hub.customers().apps_android_get(APP_NAME).execute_with_response()

        assert transport.last["headers"]["User-Agent"] == "my-tool/1.0"
        assert response.headers["X-Trace"] == "abc"
        assert app.display_name == "x"
        assert previous_root == BASE
        assert hub.root_url == "http://root/"

    def test_doit_is_execute(self, chrome):
        hub, transport = chrome()
        hub.customers().apps_android_get(APP_NAME).doit()
        assert transport.call_count == 1
