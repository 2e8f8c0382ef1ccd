"""Builds the `<api> <resource> <method>` command tree from hub metadata.

Every method of every registered hub becomes one click command. Path
parameters are positional arguments; everything else is passed as
`-p key=value` (query parameters) or `-r key=value` (request body).
"""

import json
import logging
from typing import Dict, List, Optional, Tuple

import click

from gapihub.sdk.auth import LazyTokenProvider, resolve_scope_alias, token_provider_from_config
from gapihub.sdk.call import Call, MethodSpec
from gapihub.sdk.config import load_effective_config
from gapihub.sdk.delegate import LoggingObserver, PolicyDelegate, RetryPolicy
from gapihub.sdk.exceptions import UnknownParameter, ValidationError
from gapihub.sdk.hub import Hub
from gapihub.sdk.transport import RequestsTransport

from .decorators import handle_api_errors
from .fields import build_request, split_kv

logger = logging.getLogger(__name__)

# Standard parameters every Google API accepts, by CLI name
GLOBAL_PARAMS = [
    "$-xgafv", "access-token", "alt", "callback", "fields", "key", "oauth-token",
    "pretty-print", "quota-user", "upload-type", "upload-protocol",
]

# CLI name -> wire name, where they differ
GLOBAL_PARAM_WIRE_NAMES = {
    "$-xgafv": "$.xgafv",
    "access-token": "access_token",
    "oauth-token": "oauth_token",
    "pretty-print": "prettyPrint",
    "quota-user": "quotaUser",
    "upload-type": "uploadType",
    "upload-protocol": "upload_protocol",
}


def kebab(name: str) -> str:
    return name.replace("_", "-")


def build_hub(hub_cls, options: dict) -> Hub:
    """
    Construct a hub from configuration and the global CLI options.

    Objects already present in `options` ('auth', 'transport', 'sleep')
    are used as given.
    """
    conf = load_effective_config()

    auth = options.get("auth")
    if auth is None:
        mode, token_file = conf["auth"].get("mode"), conf["auth"].get("token_file")
        if options.get("token_file"):
            mode, token_file = "token", options["token_file"]
        elif options.get("adc"):
            mode = "adc"
        elif options.get("api_key"):
            mode = "none"
        auth = LazyTokenProvider(lambda: token_provider_from_config(mode, token_file))

    transport = options.get("transport")
    if transport is None:
        transport = RequestsTransport(timeout=conf["http"].get("timeout"))

    kwargs = {}
    if options.get("sleep") is not None:
        kwargs["sleep"] = options["sleep"]

    return hub_cls(
        auth,
        transport=transport,
        base_url=(conf.get("base_urls") or {}).get(hub_cls.NAME),
        user_agent=conf["http"].get("user_agent"),
        api_key=options.get("api_key") or conf.get("api_key"),
        **kwargs,
    )


def retry_delegate_from_config() -> Optional[PolicyDelegate]:
    """A retrying delegate when retry.max_attempts > 1, else None."""
    retry = load_effective_config().get("retry") or {}
    max_attempts = int(retry.get("max_attempts") or 1)
    if max_attempts <= 1:
        return None
    policy = RetryPolicy(
        max_attempts=max_attempts,
        initial_backoff=float(retry.get("initial_backoff", 1.0)),
        max_backoff=float(retry.get("max_backoff", 32.0)),
    )
    return PolicyDelegate(policy, observer=LoggingObserver())


def apply_params(call: Call, spec: MethodSpec, args: List[str]) -> List[ValidationError]:
    """Apply `-p` arguments to `call`; returns the rejected ones."""
    method_params = {kebab(name): name for name in spec.query_params}
    problems = []
    for arg in args:
        key, value = split_kv(arg)
        if key in method_params:
            call.set(**{method_params[key]: "" if value is None else value})
        elif key in GLOBAL_PARAMS:
            call.param(GLOBAL_PARAM_WIRE_NAMES.get(key, key), "unset" if value is None else value)
        else:
            problems.append(UnknownParameter(key, GLOBAL_PARAMS + sorted(method_params)))
    return problems


def run_method(hub_cls, spec: MethodSpec, path_values: Tuple, params: List[str],
               request_fields: List[str], out: str):
    """Validate the arguments, perform the call and write the JSON result."""
    options = click.get_current_context().find_root().obj

    problems: List[ValidationError] = []
    call_args = []
    if spec.request is not None:
        request, field_problems = build_request(spec.request, request_fields)
        problems.extend(field_problems)
        call_args.append(request if request is not None else spec.request())
    call_args.extend(path_values)

    call = build_hub(hub_cls, options).call(spec, *call_args)
    problems.extend(apply_params(call, spec, params))
    if problems:
        raise click.UsageError("\n".join(str(p) for p in problems))

    if options.get("api_key"):
        call.clear_scopes()
    for scope in options.get("scopes") or ():
        call.add_scope(resolve_scope_alias(scope))
    delegate = retry_delegate_from_config()
    if delegate is not None:
        call.delegate(delegate)

    with click.open_file(out, "w") as stream:
        result = call.execute()
        stream.write(json.dumps(result.to_json_value(), indent=2))
        stream.write("\n")


def _method_command(hub_cls, method: str, spec: MethodSpec) -> click.Command:
    params = [click.Argument([name]) for name in spec.path_params]
    if spec.request is not None:
        params.append(click.Option(
            ["-r", "request_fields"], multiple=True, required=True, metavar="KEY=VALUE",
            help="Set various fields of the request structure, matching the key=value form."))
    params.append(click.Option(
        ["-p", "params"], multiple=True, metavar="KEY=VALUE",
        help="Set various optional parameters, matching the key=value form."))
    params.append(click.Option(
        ["-o", "--out", "out"], default="-", show_default=True, metavar="FILE",
        help="Specify the file into which to write the program's output."))

    @handle_api_errors
    def callback(params=(), out="-", request_fields=(), **kwargs):
        path_values = tuple(kwargs[name] for name in spec.path_params)
        run_method(hub_cls, spec, path_values, list(params), list(request_fields), out)

    return click.Command(kebab(method), params=params, callback=callback,
                         help=spec.description, short_help=spec.description.split(". ")[0])


def api_group(cli_name: str, hub_cls) -> click.Group:
    """One click group per API, one subgroup per resource."""
    group = click.Group(cli_name, help=f"{hub_cls.TITLE} ({hub_cls.VERSION}).")
    for resource, methods in hub_cls.RESOURCES.items():
        sub = click.Group(kebab(resource), help=f"Methods of the '{kebab(resource)}' resource.")
        for method, spec in methods.items():
            sub.add_command(_method_command(hub_cls, method, spec))
        group.add_command(sub)
    return group


def describe_apis(hubs: Dict[str, type]) -> List[str]:
    """Text lines listing every API, resource and method."""
    lines = []
    for cli_name, hub_cls in hubs.items():
        lines.append(f"{cli_name}  {hub_cls.TITLE} {hub_cls.VERSION}  {hub_cls.BASE_URL}")
        for resource, methods in hub_cls.RESOURCES.items():
            lines.append(f"  {kebab(resource)}")
            for method in methods:
                lines.append(f"    {kebab(method)}")
    return lines
