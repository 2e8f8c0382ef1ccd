"""Hub: the per-API root object.

A hub holds the HTTP transport, the token provider and the base/root URLs,
and hands out resources whose methods build `Call` objects.
"""

import time
import logging
from typing import Callable, Dict, Optional

from gapihub import __version__

from .auth import TokenProvider
from .call import Call, MethodSpec
from .transport import RequestsTransport

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"gapihub/{__version__}"


class Resource:
    """
    The methods of one API resource.

    Attribute access returns a builder function, so
    `hub.customers().apps_android_get(name)` returns a `Call`.
    """

    def __init__(self, hub: "Hub", name: str, methods: Dict[str, MethodSpec]):
        self._hub = hub
        self._name = name
        self._methods = methods

    @property
    def name(self) -> str:
        return self._name

    @property
    def methods(self) -> Dict[str, MethodSpec]:
        return dict(self._methods)

    def __getattr__(self, method: str) -> Callable[..., Call]:
        try:
            spec = self._methods[method]
        except KeyError:
            raise AttributeError(f"Resource '{self._name}' has no method '{method}'") from None

        def builder(*args, **kwargs) -> Call:
            return self._hub.call(spec, *args, **kwargs)

        builder.__name__ = method
        builder.__doc__ = spec.description
        return builder

    def __dir__(self):
        return list(super().__dir__()) + list(self._methods)


class Hub:
    """
    Base class of every API hub.

    Subclasses set the class attributes below; `RESOURCES` maps a resource
    name to its methods.
    """

    NAME = ""
    VERSION = ""
    TITLE = ""
    BASE_URL = ""
    ROOT_URL = ""
    RESOURCES: Dict[str, Dict[str, MethodSpec]] = {}

    def __init__(self, auth: TokenProvider, transport=None, base_url: str = None,
                 root_url: str = None, user_agent: str = None, api_key: str = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.auth = auth
        self.transport = transport or RequestsTransport()
        self.base_url = base_url or self.BASE_URL
        self.root_url = root_url or self.ROOT_URL
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.api_key = api_key
        self.sleep = sleep

    def set_user_agent(self, user_agent: str) -> str:
        """Set the User-Agent header for all requests; returns the previous value."""
        previous, self.user_agent = self.user_agent, user_agent
        return previous

    def set_base_url(self, base_url: str) -> str:
        """Set the base URL for all requests; returns the previous value."""
        previous, self.base_url = self.base_url, base_url
        return previous

    def set_root_url(self, root_url: str) -> str:
        previous, self.root_url = self.root_url, root_url
        return previous

    def resource(self, name: str) -> Resource:
        try:
            return Resource(self, name, self.RESOURCES[name])
        except KeyError:
            raise AttributeError(f"{type(self).__name__} has no resource '{name}'") from None

    def call(self, spec: MethodSpec, *args, **kwargs) -> Call:
        """Build a call for any method spec."""
        return Call(self, spec, *args, **kwargs)

    def __repr__(self):
        return f"<{type(self).__name__} {self.base_url}>"
