"""
what3words API Client Library

This module provides a Python client for the what3words v3 API
(api.what3words.com): coordinates to three word addresses and back,
autosuggest, grid sections and available languages.

Example usage:
    from lib.what3words import AutosuggestOptions, Coordinate, What3WordsClient

    client = What3WordsClient(apiKey="your_api_key", language="en")

    # Coordinates to three words
    words = client.convertTo3waWords(Coordinate(51.520847, -0.195521))

    # Three words to coordinates
    lat, lng = client.convertToCoordinatesFloats("filled.count.soap")

    # Autosuggest near a focus point
    suggestions = client.autosuggest(
        "filled.count.so",
        AutosuggestOptions(focus=Coordinate(51.4243877, -0.34745), clipToCountry="GB"),
    )
"""

from lib.what3words.client import DEFAULT_HOST, What3WordsClient
from lib.what3words.errors import (
    InvalidResponseError,
    RequestFailedError,
    TransportError,
    What3WordsError,
)
from lib.what3words.geometry import BoundingBox, Circle, Coordinate, Polygon
from lib.what3words.models import (
    AddressResponse,
    AutosuggestResponse,
    AvailableLanguagesResponse,
    GridSectionResponse,
    Language,
    LatLng,
    Suggestion,
)
from lib.what3words.options import (
    AutosuggestOptions,
    ConvertTo3waOptions,
    ConvertToCoordinatesOptions,
    GridSectionOptions,
)

__all__ = [
    "What3WordsClient",
    "DEFAULT_HOST",
    "What3WordsError",
    "TransportError",
    "RequestFailedError",
    "InvalidResponseError",
    "Coordinate",
    "Circle",
    "BoundingBox",
    "Polygon",
    "ConvertTo3waOptions",
    "ConvertToCoordinatesOptions",
    "AutosuggestOptions",
    "GridSectionOptions",
    "AddressResponse",
    "AutosuggestResponse",
    "AvailableLanguagesResponse",
    "GridSectionResponse",
    "Language",
    "LatLng",
    "Suggestion",
]
