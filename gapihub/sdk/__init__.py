"""gapihub SDK - the request pipeline shared by every API hub.

Example usage:
    from gapihub.sdk import StaticTokenProvider
    from gapihub.apis.chromemanagement1 import ChromeManagement

    hub = ChromeManagement(StaticTokenProvider("ya29..."))
    app = hub.customers().apps_android_get(
        "customers/my_customer/apps/android/com.google.android.apps.docs"
    ).execute()
    print(app.display_name)
"""

from . import config
from .auth import (
    TokenProvider, NoTokenProvider, StaticTokenProvider,
    CredentialsTokenProvider, get_credentials, token_provider_from_config,
)
from .call import Call, MethodSpec
from .delegate import (
    Delegate, DefaultDelegate, LoggingObserver, MethodInfo, PolicyDelegate,
    Retry, RetryPolicy,
)
from .exceptions import (
    GapiHubError, ValidationError, ApiError, HttpError, MissingToken,
    MissingAPIKey, Failure, BadRequest, FieldClash, JsonDecodeError,
    UploadSizeLimitExceeded, Cancelled,
)
from .hub import Hub, Resource
from .params import Params
from .schema import Schema, Empty, GoogleTypeDate, GoogleTypeMoney, GoogleRpcStatus, Int64, Duration, FieldMask
from .transport import RequestsTransport

__all__ = [
    "config",
    "TokenProvider", "NoTokenProvider", "StaticTokenProvider",
    "CredentialsTokenProvider", "get_credentials", "token_provider_from_config",
    "Call", "MethodSpec",
    "Delegate", "DefaultDelegate", "LoggingObserver", "MethodInfo",
    "PolicyDelegate", "Retry", "RetryPolicy",
    "GapiHubError", "ValidationError", "ApiError", "HttpError", "MissingToken",
    "MissingAPIKey", "Failure", "BadRequest", "FieldClash", "JsonDecodeError",
    "UploadSizeLimitExceeded", "Cancelled",
    "Hub", "Resource", "Params",
    "Schema", "Empty", "GoogleTypeDate", "GoogleTypeMoney", "GoogleRpcStatus", "Int64", "Duration", "FieldMask",
    "RequestsTransport",
]
