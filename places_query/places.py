# places_query/places.py
import logging
from dataclasses import replace
from typing import Any, Dict, Optional, Protocol, Type, TypeVar

from .options import (
    FindPlaceOptions,
    Location,
    NearbySearchOptions,
    PlaceAutocompleteOptions,
    PlaceDetailsOptions,
    PlacePhotoOptions,
    QueryAutocompleteOptions,
    TextSearchOptions,
    build_params,
)

logger = logging.getLogger(__name__)

FIND_PLACE_PATH = "/maps/api/place/findplacefromtext/json"
NEARBY_SEARCH_PATH = "/maps/api/place/nearbysearch/json"
TEXT_SEARCH_PATH = "/maps/api/place/textsearch/json"
PLACE_DETAILS_PATH = "/maps/api/place/details/json"
PLACE_PHOTO_PATH = "/maps/api/place/photo"
PLACE_AUTOCOMPLETE_PATH = "/maps/api/place/autocomplete/json"
QUERY_AUTOCOMPLETE_PATH = "/maps/api/place/queryautocomplete/json"

T = TypeVar("T")


class GetClient(Protocol):
    def get(self, path: str, params: Dict[str, Any]) -> Any: ...


def merge_options(cls: Type[T], options: Optional[T], overrides: Dict[str, Any]) -> T:
    """Keyword overrides win over the options object; unknown names raise TypeError."""
    if options is not None and not isinstance(options, cls):
        raise TypeError(f"expected {cls.__name__}, got {type(options).__name__}")
    if options is None:
        return cls(**overrides)
    if overrides:
        return replace(options, **overrides)
    return options


class PlaceQueryBuilder:
    """
    Maps typed arguments onto Places web service query parameters and
    hands them to `client.get(path, params)`. The response and any
    exception from the client are passed through untouched.
    """

    def __init__(self, client: GetClient):
        self.client = client

    def _dispatch(self, path: str, params: Dict[str, Any]) -> Any:
        logger.debug("GET %s params=%s", path, sorted(params))
        return self.client.get(path, params)

    def find_place(
        self,
        input: str,
        input_type: str,
        options: Optional[FindPlaceOptions] = None,
        **overrides: Any,
    ) -> Any:
        """
        Find places by name, address or phone number.

        input_type is "textquery" or "phonenumber".
        """
        opts = merge_options(FindPlaceOptions, options, overrides)
        params = build_params({"input": input, "inputtype": input_type}, opts)
        return self._dispatch(FIND_PLACE_PATH, params)

    def nearby_search(
        self,
        location: Location,
        options: Optional[NearbySearchOptions] = None,
        **overrides: Any,
    ) -> Any:
        """Places within an area around `location` ("lat,lng" or a pair)."""
        opts = merge_options(NearbySearchOptions, options, overrides)
        params = build_params({"location": location}, opts)
        return self._dispatch(NEARBY_SEARCH_PATH, params)

    def text_search(
        self,
        query: str,
        options: Optional[TextSearchOptions] = None,
        **overrides: Any,
    ) -> Any:
        opts = merge_options(TextSearchOptions, options, overrides)
        params = build_params({"query": query}, opts)
        return self._dispatch(TEXT_SEARCH_PATH, params)

    def place_details(
        self,
        place_id: str,
        options: Optional[PlaceDetailsOptions] = None,
        **overrides: Any,
    ) -> Any:
        opts = merge_options(PlaceDetailsOptions, options, overrides)
        params = build_params({"place_id": place_id}, opts)
        return self._dispatch(PLACE_DETAILS_PATH, params)

    def place_photos(
        self,
        photo_reference: str,
        options: Optional[PlacePhotoOptions] = None,
        **overrides: Any,
    ) -> Any:
        # The service expects at least one of maxheight/maxwidth; left to it to reject.
        opts = merge_options(PlacePhotoOptions, options, overrides)
        params = build_params({"photo_reference": photo_reference}, opts)
        return self._dispatch(PLACE_PHOTO_PATH, params)

    def place_autocomplete(
        self,
        input: str,
        options: Optional[PlaceAutocompleteOptions] = None,
        **overrides: Any,
    ) -> Any:
        opts = merge_options(PlaceAutocompleteOptions, options, overrides)
        params = build_params({"input": input}, opts)
        return self._dispatch(PLACE_AUTOCOMPLETE_PATH, params)

    def query_autocomplete(
        self,
        input: str,
        options: Optional[QueryAutocompleteOptions] = None,
        **overrides: Any,
    ) -> Any:
        opts = merge_options(QueryAutocompleteOptions, options, overrides)
        params = build_params({"input": input}, opts)
        return self._dispatch(QUERY_AUTOCOMPLETE_PATH, params)
