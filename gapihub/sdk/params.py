"""Query/path parameter assembly and URL templating.

Parameters are kept as an ordered list of (name, value) pairs so that
multi-valued query parameters serialize as repeated keys. Path parameters
are substituted into the URL template and then removed from the query.
"""

import logging
from typing import Iterable, List, Mapping, Optional, Tuple
from urllib.parse import quote, urlencode

from .exceptions import FieldClash

logger = logging.getLogger(__name__)

# Characters left as-is by reserved expansion ({+name}): '/' plus the
# RFC 3986 sub-delims and the ':' / '@' pchars.
RESERVED_SAFE = "/:@!$&'()*+,;="


def check_field_clash(known_fields: Iterable[str], additional: Mapping[str, str]):
    """
    Fail if any additional parameter shadows a field the method defines.

    Raises:
        FieldClash: naming the first offending key
    """
    for field in known_fields:
        if field in additional:
            raise FieldClash(field)


def _to_str(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def percent_encode(value: str, reserved: bool) -> str:
    """Percent-encode a path parameter for simple or reserved expansion."""
    return quote(value, safe=RESERVED_SAFE if reserved else "")


class Params:
    """Ordered multi-map of request parameters."""

    def __init__(self):
        self._pairs: List[Tuple[str, str]] = []

    def __len__(self):
        return len(self._pairs)

    def __iter__(self):
        return iter(self._pairs)

    def __contains__(self, name):
        return any(k == name for k, _ in self._pairs)

    def push(self, name: str, value) -> "Params":
        """Append a parameter. Lists repeat the key; None is skipped."""
        if value is None:
            return self
        if isinstance(value, (list, tuple)):
            for item in value:
                self.push(name, item)
            return self
        self._pairs.append((name, _to_str(value)))
        return self

    def extend(self, mapping: Mapping[str, object]) -> "Params":
        for name, value in mapping.items():
            self.push(name, value)
        return self

    def get(self, name: str) -> Optional[str]:
        """Return the first value pushed for `name`, or None."""
        for k, v in self._pairs:
            if k == name:
                return v
        return None

    def get_all(self, name: str) -> List[str]:
        return [v for k, v in self._pairs if k == name]

    def remove(self, names: Iterable[str]) -> "Params":
        names = set(names)
        self._pairs = [(k, v) for k, v in self._pairs if k not in names]
        return self

    def uri_replacement(self, url: str, param_name: str, find_this: str,
                        url_encode: bool = True) -> str:
        """
        Replace a template token with the value of a path parameter.

        Args:
            url: URL containing the token
            param_name: parameter whose value is substituted
            find_this: the token, e.g. '{+name}' or '{name}'
            url_encode: percent-encode the value

        Returns:
            The URL with the token replaced (unchanged if the parameter is unset)
        """
        value = self.get(param_name)
        if value is None:
            return url
        if url_encode:
            value = percent_encode(value, reserved=find_this.startswith("{+"))
        return url.replace(find_this, value)

    def parse_with_url(self, url: str) -> str:
        """Append the parameters to `url` as a query string."""
        if not self._pairs:
            return url
        separator = "&" if "?" in url else "?"
        return url + separator + urlencode(self._pairs)


def expand_template(base_url: str, template: str, params: Params,
                    path_params: Iterable[str]) -> str:
    """
    Build the request URL for a method.

    Substitutes every path parameter into `template`, removes the consumed
    parameters from `params` and serializes the rest as the query string.
    """
    path_params = list(path_params)
    url = base_url + template
    for name in path_params:
        for token in ("{+" + name + "}", "{" + name + "}"):
            url = params.uri_replacement(url, name, token)
    params.remove(path_params)
    url = params.parse_with_url(url)
    logger.debug(f"Expanded '{template}' to {url}")
    return url
