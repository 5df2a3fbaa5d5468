"""
what3words API Client

This module provides the What3WordsClient class for the what3words v3 API
(api.what3words.com): converting coordinates to three word addresses and back,
autosuggest, grid sections and the list of available languages.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence, Tuple, cast

import httpx

from .errors import InvalidResponseError, TransportError, parseApiError
from .geometry import BoundingBox, Coordinate
from .models import (
    AddressResponse,
    AutosuggestResponse,
    AvailableLanguagesResponse,
    GridSectionResponse,
)
from .options import (
    FORMAT_JSON,
    AutosuggestOptions,
    ConvertTo3waOptions,
    ConvertToCoordinatesOptions,
    GridSectionOptions,
    validateFormat,
)

logger = logging.getLogger(__name__)

DEFAULT_HOST = "https://api.what3words.com/v3"


class What3WordsClient:
    """Synchronous client for the what3words API, dood!

    Every endpoint method returns the decoded JSON body. Helpers such as
    convertTo3waWords() and convertToCoordinatesFloats() project a single
    field out of it. Any failure is raised as a What3WordsError subclass.

    Example:
        >>> from lib.what3words import Coordinate, What3WordsClient
        >>>
        >>> client = What3WordsClient(apiKey="your_api_key", language="en")
        >>> client.convertTo3waWords(Coordinate(51.520847, -0.195521))
        'filled.count.soap'
        >>> client.convertToCoordinatesFloats("filled.count.soap")
        (51.520847, -0.195521)
    """

    def __init__(
        self,
        apiKey: str,
        host: str = DEFAULT_HOST,
        language: Optional[str] = None,
        format: Optional[str] = None,
        requestTimeout: float = 10,
    ):
        """Initialize what3words client, dood!

        Args:
            apiKey: what3words API key (required)
            host: API base URL, change it to use a self-hosted API (default: public API)
            language: Default language for endpoints that accept one (default: None)
            format: Default response format, "json" or "geojson" (default: None)
            requestTimeout: HTTP request timeout in seconds (default: 10)
        """
        validateFormat(format)
        self.apiKey = apiKey
        self.host = host.rstrip("/")
        self.language = language
        self.format = format
        self.requestTimeout = requestTimeout

    def convertTo3wa(
        self,
        coordinate: Coordinate,
        options: Optional[ConvertTo3waOptions] = None,
    ) -> AddressResponse:
        """Convert coordinates to a three word address.

        Args:
            coordinate: Location to convert
            options: Optional language, format and locale

        Returns:
            Decoded JSON response
        """
        options = options or ConvertTo3waOptions()
        if options.language is None and self.language is not None:
            options = replace(options, language=self.language)
        if options.format is None and self.format is not None:
            options = replace(options, format=self.format)

        params = {"coordinates": coordinate.serialize()}
        params.update(options.toParams())
        return cast(AddressResponse, self._makeRequest("convert-to-3wa", params))

    def convertTo3waWords(
        self,
        coordinate: Coordinate,
        options: Optional[ConvertTo3waOptions] = None,
    ) -> str:
        """Convert coordinates and return only the three words (e.g. "filled.count.soap")."""
        options = replace(options or ConvertTo3waOptions(), format=FORMAT_JSON)
        data = self.convertTo3wa(coordinate, options)
        return cast(str, extractField(data, ("words",), str))

    def convertToCoordinates(
        self,
        words: str,
        options: Optional[ConvertToCoordinatesOptions] = None,
    ) -> AddressResponse:
        """Convert a three word address to coordinates.

        Args:
            words: Three word address, e.g. "filled.count.soap"
            options: Optional format and locale

        Returns:
            Decoded JSON response
        """
        options = options or ConvertToCoordinatesOptions()
        if options.format is None and self.format is not None:
            options = replace(options, format=self.format)

        params = {"words": words}
        params.update(options.toParams())
        return cast(AddressResponse, self._makeRequest("convert-to-coordinates", params))

    def convertToCoordinatesFloats(
        self,
        words: str,
        options: Optional[ConvertToCoordinatesOptions] = None,
    ) -> Tuple[float, float]:
        """Convert a three word address and return (latitude, longitude), dood!"""
        options = replace(options or ConvertToCoordinatesOptions(), format=FORMAT_JSON)
        data = self.convertToCoordinates(words, options)
        latitude = extractField(data, ("coordinates", "lat"), float)
        longitude = extractField(data, ("coordinates", "lng"), float)
        return float(latitude), float(longitude)

    def autosuggest(
        self,
        input: str,
        options: Optional[AutosuggestOptions] = None,
    ) -> AutosuggestResponse:
        """Suggest three word addresses for partial or mistyped input.

        Args:
            input: Full or partial three word address, e.g. "filled.count.so"
            options: Focus point, clipping shapes, language and so on

        Returns:
            Decoded JSON response with the "suggestions" list
        """
        options = options or AutosuggestOptions()
        if options.language is None and self.language is not None:
            options = replace(options, language=self.language)

        params = {"input": input}
        params.update(options.toParams())
        return cast(AutosuggestResponse, self._makeRequest("autosuggest", params))

    def autosuggestWords(
        self,
        input: str,
        options: Optional[AutosuggestOptions] = None,
    ) -> List[str]:
        """Return only the words of each suggestion, in rank order."""
        data = self.autosuggest(input, options)
        suggestions = extractField(data, ("suggestions",), list)
        return [cast(str, extractField(suggestion, ("words",), str)) for suggestion in suggestions]

    def gridSection(
        self,
        boundingBox: BoundingBox,
        options: Optional[GridSectionOptions] = None,
    ) -> GridSectionResponse:
        """Return the grid lines of all what3words squares inside the bounding box.

        The API rejects boxes with a diagonal longer than 4km.
        """
        options = options or GridSectionOptions()
        if options.format is None and self.format is not None:
            options = replace(options, format=self.format)

        params = {"bounding-box": boundingBox.serialize()}
        params.update(options.toParams())
        return cast(GridSectionResponse, self._makeRequest("grid-section", params))

    def availableLanguages(self) -> AvailableLanguagesResponse:
        """Return all languages and locales supported by the API."""
        return cast(AvailableLanguagesResponse, self._makeRequest("available-languages", {}))

    def availableLanguageCodes(self) -> List[str]:
        """Return only the ISO 639-1 codes of the available languages."""
        data = self.availableLanguages()
        languages = extractField(data, ("languages",), list)
        return [cast(str, extractField(language, ("code",), str)) for language in languages]

    def buildUrl(self, endpoint: str, params: Dict[str, Any]) -> str:
        """Return the full request URL for the endpoint, API key included."""
        return str(httpx.URL(f"{self.host}/{endpoint}", params=self._buildQuery(params)))

    def _buildQuery(self, params: Dict[str, Any]) -> Dict[str, Any]:
        query: Dict[str, Any] = {"key": self.apiKey}
        query.update(params)
        return query

    def _makeRequest(self, endpoint: str, params: Dict[str, Any]) -> Any:
        """Make HTTP GET request to the what3words API, dood!

        Single point for all HTTP requests. Creates a new session per request.

        Args:
            endpoint: API endpoint path (e.g., "convert-to-3wa", "autosuggest")
            params: Query parameters (API key is added automatically)

        Returns:
            Decoded JSON body

        Raises:
            TransportError: Timeout or network error
            RequestFailedError: Any status outside 2xx
            InvalidResponseError: Body is not valid JSON
        """
        url = f"{self.host}/{endpoint}"
        query = self._buildQuery(params)
        logger.debug(f"Making request to {url} with params: {dict(query, key='***')}")

        try:
            with httpx.Client(timeout=self.requestTimeout) as session:
                response = session.get(url, params=query)
        except httpx.TimeoutException as e:
            logger.error(f"Request timeout: {endpoint}")
            raise TransportError(f"Request to {endpoint} timed out") from e
        except httpx.RequestError as e:
            logger.error(f"Network error: {e}")
            raise TransportError(f"Request to {endpoint} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            error = parseApiError(response)
            if response.status_code >= 500:
                logger.error(f"Server error: {error}")
            else:
                logger.warning(f"API request failed: {error}")
            raise error

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Failed to parse JSON response: {e}")
            raise InvalidResponseError(f"Response from {endpoint} is not valid JSON") from e

        logger.debug(f"API request successful: {response.status_code}")
        return data


def extractField(data: Any, path: Sequence[str], expectedType: type) -> Any:
    """Walk the nested dict along path and check the leaf type, dood!

    Floats also accept ints, but never bools.

    Raises:
        InvalidResponseError: A key is missing or the value has the wrong type
    """
    fieldName = ".".join(path)
    value = data
    for key in path:
        if not isinstance(value, dict) or key not in value:
            raise InvalidResponseError(f"Field '{fieldName}' is missing in response")
        value = value[key]

    if isinstance(value, bool) and expectedType is not bool:
        isValid = False
    elif expectedType is float:
        isValid = isinstance(value, (int, float))
    else:
        isValid = isinstance(value, expectedType)

    if not isValid:
        raise InvalidResponseError(
            f"Field '{fieldName}' has type {type(value).__name__}, expected {expectedType.__name__}"
        )
    return value
