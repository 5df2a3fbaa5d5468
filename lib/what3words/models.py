"""
what3words API Data Models

TypedDict shapes of the JSON bodies returned by the what3words v3 API
(format=json). Responses are returned to callers as plain dicts; these types
only document them for type checkers.
"""

import sys
from typing import List, NotRequired

if sys.version_info >= (3, 14):
    from typing import TypedDict
else:
    from typing_extensions import TypedDict


class LatLng(TypedDict):
    """Latitude/longitude pair as returned by the API, dood!"""

    lat: float
    lng: float


class Square(TypedDict):
    """The 3m x 3m grid square of a three word address."""

    southwest: LatLng
    northeast: LatLng


class AddressResponse(TypedDict):
    """Body of convert-to-3wa and convert-to-coordinates responses."""

    country: str  # ISO 3166-1 alpha-2 code, "ZZ" for the sea
    square: Square
    nearestPlace: str
    coordinates: LatLng
    words: str  # e.g. "filled.count.soap"
    language: str
    locale: NotRequired[str]
    map: str  # Link to the what3words map


class Suggestion(TypedDict):
    """Single entry of an autosuggest response."""

    country: str
    nearestPlace: str
    words: str
    rank: int
    language: str
    locale: NotRequired[str]
    distanceToFocusKm: NotRequired[float]  # Only when focus was given


class AutosuggestResponse(TypedDict):
    suggestions: List[Suggestion]


class GridLine(TypedDict):
    start: LatLng
    end: LatLng


class GridSectionResponse(TypedDict):
    lines: List[GridLine]


class Locale(TypedDict):
    nativeName: str
    code: str
    name: str


class Language(TypedDict):
    """Language supported by the API, dood!"""

    nativeName: str
    code: str  # ISO 639-1 code
    name: str
    locales: NotRequired[List[Locale]]


class AvailableLanguagesResponse(TypedDict):
    languages: List[Language]


class ErrorDetails(TypedDict):
    code: str  # e.g. "BadWords", "InvalidKey"
    message: str


class ErrorResponse(TypedDict):
    """Error envelope sent along with 4xx/5xx responses."""

    error: ErrorDetails
