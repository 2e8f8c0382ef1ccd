"""The generic REST call: one request description plus one executor.

Every API method is a `MethodSpec` (HTTP method, URL template, parameter
names, scopes and response schema). `Hub.call()` binds arguments to a method spec
and returns a `Call`, which collects optional settings fluently and is
consumed by `execute()`:

    budget = (hub.billing_accounts()
                 .budgets_get("billingAccounts/0123/budgets/abc")
                 .param("quotaUser", "me")
                 .execute())
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Type

import requests

from .delegate import Delegate, MethodInfo, Retry
from .exceptions import (
    BadRequest, Cancelled, Failure, HttpError, JsonDecodeError,
    MissingAPIKey, MissingToken, UploadSizeLimitExceeded,
)
from .params import Params, check_field_clash, expand_template
from .schema import Empty, Schema, SchemaDecodeError, parse_error_envelope

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MethodSpec:
    """Static description of one REST method."""
    id: str
    http_method: str
    path: str
    response: Type[Schema]
    path_params: Tuple[str, ...] = ()
    # python keyword -> wire name
    query_params: Mapping[str, str] = field(default_factory=dict)
    scopes: Tuple[str, ...] = ()
    request: Optional[Type[Schema]] = None
    max_upload_size: Optional[int] = None
    description: str = ""

    @property
    def known_fields(self) -> Tuple[str, ...]:
        """Wire names that additional parameters may not use."""
        fields = ("alt",) + tuple(self.path_params) + tuple(self.query_params.values())
        if self.max_upload_size is not None:
            fields += ("uploadType",)
        return fields


class Call:
    """
    A request under construction for one method.

    Path parameters are bound positionally at construction, query parameters
    as keyword arguments. A call executes once.
    """

    def __init__(self, hub, spec: MethodSpec, *args, **kwargs):
        self._hub = hub
        self._spec = spec
        self._request: Optional[Schema] = None
        self._path_values: Dict[str, Any] = {}
        self._query_values: Dict[str, Any] = {}
        self._additional_params: Dict[str, str] = {}
        self._scopes: Optional[set] = None
        self._delegate: Optional[Delegate] = None
        self._consumed = False
        self._bind(list(args), dict(kwargs))

    def _bind(self, args: list, kwargs: dict):
        spec = self._spec
        if spec.request is not None:
            if args:
                request = args.pop(0)
            elif "request" in kwargs:
                request = kwargs.pop("request")
            else:
                raise TypeError(f"{spec.id}: missing required argument 'request'")
            if not isinstance(request, spec.request):
                request = spec.request.model_validate(request)
            self._request = request

        for name in spec.path_params:
            if args:
                value = args.pop(0)
            elif name in kwargs:
                value = kwargs.pop(name)
            else:
                raise TypeError(f"{spec.id}: missing required argument '{name}'")
            if value is None:
                raise TypeError(f"{spec.id}: required argument '{name}' must not be None")
            self._path_values[name] = value
        if args:
            raise TypeError(f"{spec.id}: too many positional arguments")
        self.set(**kwargs)

    @property
    def spec(self) -> MethodSpec:
        return self._spec

    @property
    def scopes(self) -> Tuple[str, ...]:
        """The scopes the call will request a token for."""
        if self._scopes is None:
            return tuple(self._spec.scopes)
        return tuple(sorted(self._scopes))

    def set(self, **kwargs) -> "Call":
        """Set optional query parameters by their python names."""
        for name, value in kwargs.items():
            if name not in self._spec.query_params:
                raise TypeError(f"{self._spec.id}: unexpected keyword argument '{name}'")
            self._query_values[name] = value
        return self

    def param(self, name: str, value) -> "Call":
        """
        Set any additional query parameter, e.g. 'fields', 'quotaUser' or 'key'.

        Must not be used for parameters the method defines itself; doing so
        makes the call fail with FieldClash.
        """
        self._additional_params[name] = value
        return self

    def add_scope(self, scope: str) -> "Call":
        """Request `scope` instead of the method's default scopes."""
        if self._scopes is None:
            self._scopes = set()
        self._scopes.add(scope)
        return self

    def add_scopes(self, scopes: Iterable[str]) -> "Call":
        for scope in scopes:
            self.add_scope(scope)
        return self

    def clear_scopes(self) -> "Call":
        """Use no scopes at all; the call then needs an API key ('key' parameter)."""
        self._scopes = set()
        return self

    def delegate(self, delegate: Delegate) -> "Call":
        """Consult `delegate` for retries and progress while executing."""
        self._delegate = delegate
        return self

    def execute(self) -> Schema:
        """Perform the request and return the decoded response."""
        return self.execute_with_response()[1]

    doit = execute

    def execute_with_response(self) -> Tuple[requests.Response, Schema]:
        """Perform the request and return (raw response, decoded response)."""
        if self._consumed:
            raise RuntimeError(f"{self._spec.id}: call has already been executed")
        self._consumed = True

        spec = self._spec
        dlg = self._delegate or Delegate()
        dlg.begin(MethodInfo(spec.id, spec.http_method))
        success = False
        try:
            url, body = self._prepare()
            response, result = _execute(self._hub, spec, url, body, self.scopes, dlg)
            success = True
            return response, result
        finally:
            dlg.finished(success)

    def _prepare(self) -> Tuple[str, Optional[bytes]]:
        spec = self._spec
        check_field_clash(spec.known_fields, self._additional_params)

        params = Params()
        for name in spec.path_params:
            params.push(name, self._path_values[name])
        for name, wire_name in spec.query_params.items():
            params.push(wire_name, self._query_values.get(name))
        params.extend(self._additional_params)
        params.push("alt", "json")

        if not self.scopes and "key" not in params:
            if not self._hub.api_key:
                raise MissingAPIKey()
            params.push("key", self._hub.api_key)

        url = expand_template(self._hub.base_url, spec.path, params, spec.path_params)

        body = None
        if self._request is not None:
            body = json.dumps(self._request.to_json_value()).encode("utf-8")
            if spec.max_upload_size is not None and len(body) > spec.max_upload_size:
                raise UploadSizeLimitExceeded(len(body), spec.max_upload_size)
        return url, body

    def __repr__(self):
        return f"<Call {self._spec.id}>"


def _decision(hook: str, value) -> Retry:
    if not isinstance(value, Retry):
        raise TypeError(f"Delegate.{hook} must return a Retry, got {value!r}")
    return value


def _execute(hub, spec: MethodSpec, url: str, body: Optional[bytes],
             scopes: Tuple[str, ...], dlg: Delegate):
    """Token -> send -> decode loop; retries only when the delegate says so."""
    while True:
        token = None
        if scopes:
            try:
                token = hub.auth.get_token(scopes)
            except Exception as e:
                logger.debug(f"Token acquisition failed for {spec.id}: {e}")
                token = dlg.token(e)
                if token is None:
                    raise MissingToken(e) from e

        headers = {"User-Agent": hub.user_agent}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if body is not None:
            headers["Content-Type"] = "application/json"

        dlg.pre_request()
        try:
            response = hub.transport.request(spec.http_method, url, headers, body)
        except requests.RequestException as e:
            decision = _decision("http_error", dlg.http_error(e))
            if decision.is_retry:
                logger.debug(f"Retrying {spec.id} in {decision.delay:.2f}s after transport error")
                hub.sleep(decision.delay)
                continue
            if decision == Retry.CANCEL:
                raise Cancelled() from e
            raise HttpError(e) from e

        if not 200 <= response.status_code < 300:
            server_error = parse_error_envelope(response.text)
            decision = _decision("http_failure", dlg.http_failure(response, server_error))
            if decision.is_retry:
                logger.debug(f"Retrying {spec.id} in {decision.delay:.2f}s after HTTP {response.status_code}")
                hub.sleep(decision.delay)
                continue
            if decision == Retry.CANCEL:
                raise Cancelled()
            if server_error is not None:
                raise BadRequest(server_error)
            raise Failure(response)

        text = response.text
        if spec.response is Empty and not text.strip():
            text = "{}"
        try:
            result = spec.response.decode(text)
        except SchemaDecodeError as e:
            dlg.response_json_decode_error(text, e)
            raise JsonDecodeError(text, str(e)) from e

        return response, result
