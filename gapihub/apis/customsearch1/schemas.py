"""Custom Search API v1 schemas."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from gapihub.sdk.schema import Int64, Schema


class Query(Schema):
    """The parameters of a query that was or can be performed."""
    count: Optional[int] = None
    cr: Optional[str] = None
    cx: Optional[str] = None
    date_restrict: Optional[str] = None
    disable_cn_tw_translation: Optional[str] = None
    exact_terms: Optional[str] = None
    exclude_terms: Optional[str] = None
    file_type: Optional[str] = None
    filter: Optional[str] = None
    gl: Optional[str] = None
    google_host: Optional[str] = None
    high_range: Optional[str] = None
    hl: Optional[str] = None
    hq: Optional[str] = None
    img_color_type: Optional[str] = None
    img_dominant_color: Optional[str] = None
    img_size: Optional[str] = None
    img_type: Optional[str] = None
    input_encoding: Optional[str] = None
    language: Optional[str] = None
    link_site: Optional[str] = None
    low_range: Optional[str] = None
    or_terms: Optional[str] = None
    output_encoding: Optional[str] = None
    related_site: Optional[str] = None
    rights: Optional[str] = None
    safe: Optional[str] = None
    search_terms: Optional[str] = None
    search_type: Optional[str] = None
    site_search: Optional[str] = None
    site_search_filter: Optional[str] = None
    sort: Optional[str] = None
    start_index: Optional[int] = None
    start_page: Optional[int] = None
    title: Optional[str] = None
    total_results: Optional[Int64] = None


class SearchQueries(Schema):
    next_page: Optional[List[Query]] = None
    previous_page: Optional[List[Query]] = None
    request: Optional[List[Query]] = None


class SearchInformation(Schema):
    formatted_search_time: Optional[str] = None
    formatted_total_results: Optional[str] = None
    search_time: Optional[float] = None
    total_results: Optional[str] = None


class SearchSpelling(Schema):
    corrected_query: Optional[str] = None
    html_corrected_query: Optional[str] = None


class SearchUrl(Schema):
    template: Optional[str] = None
    type: Optional[str] = None


class ResultImage(Schema):
    byte_size: Optional[int] = None
    context_link: Optional[str] = None
    height: Optional[int] = None
    thumbnail_height: Optional[int] = None
    thumbnail_link: Optional[str] = None
    thumbnail_width: Optional[int] = None
    width: Optional[int] = None


class ResultLabel(Schema):
    display_name: Optional[str] = None
    # the only snake_case name on the wire
    label_with_op: Optional[str] = Field(default=None, alias="label_with_op")
    name: Optional[str] = None


class Result(Schema):
    """A custom search result."""
    cache_id: Optional[str] = None
    display_link: Optional[str] = None
    file_format: Optional[str] = None
    formatted_url: Optional[str] = None
    html_formatted_url: Optional[str] = None
    html_snippet: Optional[str] = None
    html_title: Optional[str] = None
    image: Optional[ResultImage] = None
    kind: Optional[str] = None
    labels: Optional[List[ResultLabel]] = None
    link: Optional[str] = None
    mime: Optional[str] = None
    pagemap: Optional[Dict[str, Any]] = None
    snippet: Optional[str] = None
    title: Optional[str] = None


class PromotionImage(Schema):
    height: Optional[int] = None
    source: Optional[str] = None
    width: Optional[int] = None


class PromotionBodyLines(Schema):
    html_title: Optional[str] = None
    link: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None


class Promotion(Schema):
    body_lines: Optional[List[PromotionBodyLines]] = None
    display_link: Optional[str] = None
    html_title: Optional[str] = None
    image: Optional[PromotionImage] = None
    link: Optional[str] = None
    title: Optional[str] = None


class Search(Schema):
    """Response to a custom search request."""
    context: Optional[Dict[str, Any]] = None
    items: Optional[List[Result]] = None
    kind: Optional[str] = None
    promotions: Optional[List[Promotion]] = None
    queries: Optional[SearchQueries] = None
    search_information: Optional[SearchInformation] = None
    spelling: Optional[SearchSpelling] = None
    url: Optional[SearchUrl] = None
