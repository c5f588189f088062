# places_query/options.py
from dataclasses import dataclass, field, fields
from typing import AbstractSet, Any, Dict, Optional, Sequence, Union


def wire(name: str) -> Any:
    """Optional field sent under a different query-parameter name."""
    return field(default=None, metadata={"wire": name})


def is_set(value: Any) -> bool:
    # False and 0 are real values; only None and empties mean "unset"
    if value is None:
        return False
    if isinstance(value, (str, list, tuple, set, frozenset)) and len(value) == 0:
        return False
    return True


def to_wire_value(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        # unordered input; sort so the query string is stable
        return ",".join(sorted(str(v) for v in value))
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return value


def build_params(required: Dict[str, Any], options: Any = None) -> Dict[str, Any]:
    """
    Required keys first, then every set option under its wire key,
    in dataclass field order.
    """
    params: Dict[str, Any] = {}
    for key, value in required.items():
        if value is None:
            raise ValueError(f"Missing required argument: {key}")
        params[key] = to_wire_value(value)

    if options is None:
        return params

    for f in fields(options):
        value = getattr(options, f.name)
        if is_set(value):
            params[f.metadata.get("wire", f.name)] = to_wire_value(value)
    return params


Location = Union[str, Sequence[float]]
FieldList = Union[Sequence[str], AbstractSet[str]]


@dataclass(frozen=True)
class FindPlaceOptions:
    fields: Optional[FieldList] = None
    language: Optional[str] = None
    location_bias: Optional[str] = wire("locationbias")


@dataclass(frozen=True)
class NearbySearchOptions:
    radius: Optional[int] = None
    key_word: Optional[str] = wire("keyword")
    language: Optional[str] = None
    max_price: Optional[int] = wire("maxprice")
    min_price: Optional[int] = wire("minprice")
    open_now: Optional[bool] = wire("opennow")
    page_token: Optional[str] = wire("pagetoken")
    rank_by: Optional[str] = wire("rankby")  # prominence | distance
    type: Optional[str] = None


@dataclass(frozen=True)
class TextSearchOptions:
    radius: Optional[int] = None
    language: Optional[str] = None
    location: Optional[Location] = None
    max_price: Optional[int] = wire("maxprice")
    min_price: Optional[int] = wire("minprice")
    open_now: Optional[bool] = wire("opennow")
    page_token: Optional[str] = wire("pagetoken")
    region: Optional[str] = None
    type: Optional[str] = None


@dataclass(frozen=True)
class PlaceDetailsOptions:
    language: Optional[str] = None
    fields: Optional[FieldList] = None
    region: Optional[str] = None
    reviews_no_translations: Optional[bool] = None
    reviews_sort: Optional[str] = None  # most_relevant | newest
    session_token: Optional[str] = wire("sessiontoken")


@dataclass(frozen=True)
class PlacePhotoOptions:
    max_height: Optional[int] = wire("maxheight")
    max_width: Optional[int] = wire("maxwidth")


@dataclass(frozen=True)
class PlaceAutocompleteOptions:
    radius: Optional[int] = None
    components: Optional[str] = None
    language: Optional[str] = None
    location: Optional[Location] = None
    location_bias: Optional[str] = wire("locationbias")
    location_restriction: Optional[str] = wire("locationrestriction")
    offset: Optional[int] = None
    origin: Optional[Location] = None
    region: Optional[str] = None
    session_token: Optional[str] = wire("sessiontoken")
    strict_bounds: Optional[bool] = wire("strictbounds")
    types: Optional[str] = None


@dataclass(frozen=True)
class QueryAutocompleteOptions:
    radius: Optional[int] = None
    language: Optional[str] = None
    location: Optional[Location] = None
    offset: Optional[int] = None
