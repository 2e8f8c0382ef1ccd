"""Authentication and token acquisition for gapihub.

A hub asks its token provider for a bearer token every time a call
(re)enters token acquisition. Providers do not persist tokens: refreshing
and caching is left to the google-auth credentials they wrap.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)

# Scope aliases for CLI convenience
SCOPE_ALIASES = {
    "cloud-platform": "https://www.googleapis.com/auth/cloud-platform",
    "cloud-billing": "https://www.googleapis.com/auth/cloud-billing",
    "chrome-appdetails": "https://www.googleapis.com/auth/chrome.management.appdetails.readonly",
    "chrome-reports": "https://www.googleapis.com/auth/chrome.management.reports.readonly",
    "chrome-telemetry": "https://www.googleapis.com/auth/chrome.management.telemetry.readonly",
}


def resolve_scope_alias(alias: str) -> str:
    """Resolve a scope alias to its full URL, or return the input if not an alias."""
    return SCOPE_ALIASES.get(alias, alias)


class TokenProvider:
    """Supplies bearer tokens for a set of scopes."""

    def get_token(self, scopes: Iterable[str]) -> Optional[str]:
        """
        Return a bearer token valid for `scopes`.

        Returns:
            The token, or None when the provider has nothing to offer

        Raises:
            Exception if the token could not be obtained
        """
        raise NotImplementedError


class NoTokenProvider(TokenProvider):
    """Provider for hubs that only make API-key authenticated calls."""

    def get_token(self, scopes):
        return None


class StaticTokenProvider(TokenProvider):
    """Returns the same pre-obtained token for every scope set."""

    def __init__(self, token: str):
        self.token = token

    def get_token(self, scopes):
        return self.token


class CredentialsTokenProvider(TokenProvider):
    """
    Token provider backed by google-auth credentials.

    Credentials that require scopes (service accounts, ADC from a key file)
    are re-scoped per call; user credentials keep the scopes they were
    granted.
    """

    def __init__(self, credentials, request=None):
        self.credentials = credentials
        self._request = request

    def _transport_request(self):
        if self._request is None:
            from google.auth.transport.requests import Request
            self._request = Request()
        return self._request

    def get_token(self, scopes):
        from google.auth.credentials import with_scopes_if_required

        creds = with_scopes_if_required(self.credentials, sorted(scopes))
        if not creds.valid:
            logger.debug("Refreshing credentials")
            creds.refresh(self._transport_request())
        if not creds.token:
            raise ValueError("Credentials object has no access token.")
        return creds.token


def get_credentials(
    token_file: str = None,
    use_adc: bool = False,
) -> Tuple[Any, str]:
    """
    Load credentials from an authorized-user token file or ADC.

    Args:
        token_file: Path to an authorized-user JSON token file
        use_adc: Use Application Default Credentials

    Returns:
        Tuple of (credentials object, source description)

    Raises:
        ValueError: If neither source is selected
        FileNotFoundError: If the token file does not exist
    """
    import google.auth
    from google.oauth2.credentials import Credentials

    if token_file:
        path = Path(token_file).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Token file not found: {path}")
        creds = Credentials.from_authorized_user_file(str(path))
        return creds, f"Token file: {path}"

    if use_adc:
        creds, project = google.auth.default()
        source = "Application Default Credentials"
        if project:
            source += f" (project: {project})"
        return creds, source

    raise ValueError("No credentials configured. Set 'auth.mode' to 'token' or 'adc', "
                     "or pass --token-file / --adc.")


def token_provider_from_config(mode: str = None, token_file: str = None) -> TokenProvider:
    """
    Build the token provider selected by configuration.

    Args:
        mode: 'token', 'adc' or 'none'; defaults to the configured auth.mode
        token_file: overrides auth.token_file
    """
    from .config import get_config_value

    mode = mode or get_config_value("auth.mode", "adc")
    if mode == "none":
        return NoTokenProvider()
    if mode == "token":
        token_file = token_file or get_config_value("auth.token_file")
        if not token_file:
            raise ValueError("auth.mode is 'token' but no token file is configured.")
        creds, source = get_credentials(token_file=token_file)
    elif mode == "adc":
        creds, source = get_credentials(use_adc=True)
    else:
        raise ValueError(f"Unknown auth mode: {mode}")
    logger.debug(f"Using credentials from {source}")
    return CredentialsTokenProvider(creds)


class LazyTokenProvider(TokenProvider):
    """Defers loading credentials until the first token is needed."""

    def __init__(self, factory):
        self._factory = factory
        self._provider = None

    def get_token(self, scopes):
        if self._provider is None:
            self._provider = self._factory()
        return self._provider.get_token(scopes)
