"""Custom Search API v1.

Searches over a website or collection of websites. The API defines no OAuth
scopes, so every call is authorized by an API key:

    hub = CustomSearchAPI(NoTokenProvider(), api_key="AIza...")
    results = hub.cse().list(q="pydantic", cx="0123:abcd").execute()
"""

from pydantic.alias_generators import to_camel

from gapihub.sdk.call import MethodSpec
from gapihub.sdk.hub import Hub, Resource

from . import schemas
from .schemas import *  # noqa: F401,F403

_QUERY_PARAMS = {
    name: to_camel(name)
    for name in (
        "c2coff", "cr", "cx", "date_restrict", "exact_terms", "exclude_terms",
        "file_type", "filter", "gl", "googlehost", "high_range", "hl", "hq",
        "img_color_type", "img_dominant_color", "img_size", "img_type",
        "link_site", "low_range", "lr", "num", "or_terms", "q", "related_site",
        "rights", "safe", "search_type", "site_search", "site_search_filter",
        "sort", "start",
    )
}

CSE = {
    "list": MethodSpec(
        id="search.cse.list",
        http_method="GET",
        path="customsearch/v1",
        query_params=_QUERY_PARAMS,
        response=schemas.Search,
        description="Returns metadata about the search performed, metadata about the engine "
                    "used for the search, and the search results.",
    ),
    "siterestrict_list": MethodSpec(
        id="search.cse.siterestrict.list",
        http_method="GET",
        path="customsearch/v1/siterestrict",
        query_params=_QUERY_PARAMS,
        response=schemas.Search,
        description="Returns metadata about the search performed, metadata about the engine "
                    "used for the search, and the search results. Uses a small set of url "
                    "patterns.",
    ),
}


class CustomSearchAPI(Hub):
    """Central instance to access all Custom Search resources."""

    NAME = "customsearch"
    VERSION = "v1"
    TITLE = "Custom Search API"
    BASE_URL = "https://customsearch.googleapis.com/"
    ROOT_URL = "https://customsearch.googleapis.com/"
    RESOURCES = {"cse": CSE}

    def cse(self) -> Resource:
        return self.resource("cse")
