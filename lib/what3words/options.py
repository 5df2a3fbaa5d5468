"""
what3words endpoint option bags

Each options class holds the optional query parameters of a single endpoint.
Fields left as None are omitted from the query string, dood!
"""

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Union

from .geometry import BoundingBox, Circle, Coordinate, Polygon

FORMAT_JSON = "json"
FORMAT_GEOJSON = "geojson"
SUPPORTED_FORMATS = (FORMAT_JSON, FORMAT_GEOJSON)


def validateFormat(format: Optional[str]) -> None:
    """Raise ValueError if format is set and not supported by the API."""
    if format is not None and format not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported format '{format}', expected one of {SUPPORTED_FORMATS}")


def formatBool(value: bool) -> str:
    return "true" if value else "false"


def formatCountries(value: Union[str, Sequence[str]]) -> str:
    """Join country codes into the comma-separated list the API expects."""
    if isinstance(value, str):
        return value
    return ",".join(value)


@dataclass(frozen=True)
class ConvertTo3waOptions:
    """Options for the convert-to-3wa endpoint."""

    language: Optional[str] = None
    format: Optional[str] = None
    locale: Optional[str] = None

    def __post_init__(self):
        validateFormat(self.format)

    def toParams(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.language is not None:
            params["language"] = self.language
        if self.format is not None:
            params["format"] = self.format
        if self.locale is not None:
            params["locale"] = self.locale
        return params


@dataclass(frozen=True)
class ConvertToCoordinatesOptions:
    """Options for the convert-to-coordinates endpoint."""

    format: Optional[str] = None
    locale: Optional[str] = None

    def __post_init__(self):
        validateFormat(self.format)

    def toParams(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.format is not None:
            params["format"] = self.format
        if self.locale is not None:
            params["locale"] = self.locale
        return params


@dataclass(frozen=True)
class AutosuggestOptions:
    """Options for the autosuggest endpoint, dood!

    Attributes:
        focus: Coordinate to bias suggestions towards
        clipToCircle: Only return suggestions inside this circle
        clipToCountry: ISO 3166-1 alpha-2 code(s), as "GB,FR" or ["GB", "FR"]; empty is omitted
        clipToBoundingBox: Only return suggestions inside this rectangle
        clipToPolygon: Only return suggestions inside this polygon
        language: Language of the input three words
        preferLand: Prefer suggestions on land (API default is true)
        locale: Locale variant of the language
    """

    focus: Optional[Coordinate] = None
    clipToCircle: Optional[Circle] = None
    clipToCountry: Optional[Union[str, Sequence[str]]] = None
    clipToBoundingBox: Optional[BoundingBox] = None
    clipToPolygon: Optional[Polygon] = None
    language: Optional[str] = None
    preferLand: Optional[bool] = None
    locale: Optional[str] = None

    def toParams(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.focus is not None:
            params["focus"] = self.focus.serialize()
        if self.clipToCircle is not None:
            params["clip-to-circle"] = self.clipToCircle.serialize()
        if self.clipToCountry:
            params["clip-to-country"] = formatCountries(self.clipToCountry)
        if self.clipToBoundingBox is not None:
            params["clip-to-bounding-box"] = self.clipToBoundingBox.serialize()
        if self.clipToPolygon is not None:
            params["clip-to-polygon"] = self.clipToPolygon.serialize()
        if self.language is not None:
            params["language"] = self.language
        if self.preferLand is not None:
            params["prefer-land"] = formatBool(self.preferLand)
        if self.locale is not None:
            params["locale"] = self.locale
        return params


@dataclass(frozen=True)
class GridSectionOptions:
    """Options for the grid-section endpoint."""

    format: Optional[str] = None

    def __post_init__(self):
        validateFormat(self.format)

    def toParams(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.format is not None:
            params["format"] = self.format
        return params
