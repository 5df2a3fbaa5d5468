"""
w3w - command line client for the what3words API with TOML configuration.
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, List, Optional

from internal.config.manager import ConfigManager
from lib.logging_utils import initLogging
from lib.what3words import (
    DEFAULT_HOST,
    AutosuggestOptions,
    BoundingBox,
    ConvertTo3waOptions,
    ConvertToCoordinatesOptions,
    Coordinate,
    GridSectionOptions,
    What3WordsClient,
    What3WordsError,
)

# Configure basic logging first
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.WARNING)
logger = logging.getLogger(__name__)


def createClient(configManager: ConfigManager) -> What3WordsClient:
    """Create what3words client from the [what3words] config table."""
    w3wConfig = configManager.getWhat3WordsConfig()
    return What3WordsClient(
        apiKey=configManager.getApiKey(),
        host=w3wConfig.get("host", DEFAULT_HOST),
        language=w3wConfig.get("language", None),
        format=w3wConfig.get("format", None),
        requestTimeout=w3wConfig.get("request-timeout", 10),
    )


def parseCoordinate(value: str) -> Coordinate:
    """Parse "LAT,LNG" command line value."""
    try:
        latitude, longitude = (float(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LAT,LNG, got '{value}'") from None
    return Coordinate(latitude, longitude)


def parseArguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="what3words API command line client, dood!")
    parser.add_argument(
        "-c",
        "--config",
        default="config.toml",
        help="Path to configuration file (default: config.toml)",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    to3wa = subparsers.add_parser("to-3wa", help="Convert coordinates to a three word address")
    to3wa.add_argument("latitude", type=float)
    to3wa.add_argument("longitude", type=float)
    to3wa.add_argument("--language")
    to3wa.add_argument("--locale")
    to3wa.add_argument("--words", action="store_true", help="Print only the three words")

    toCoords = subparsers.add_parser("to-coords", help="Convert a three word address to coordinates")
    toCoords.add_argument("words")
    toCoords.add_argument("--locale")
    toCoords.add_argument("--floats", action="store_true", help="Print only latitude and longitude")

    autosuggest = subparsers.add_parser("autosuggest", help="Suggest three word addresses for input")
    autosuggest.add_argument("input")
    autosuggest.add_argument("--focus", type=parseCoordinate, help="Focus point as LAT,LNG")
    autosuggest.add_argument("--country", help="Clip to comma-separated country codes")
    autosuggest.add_argument("--language")
    autosuggest.add_argument("--prefer-land", choices=["true", "false"])
    autosuggest.add_argument("--words", action="store_true", help="Print only suggested words")

    gridSection = subparsers.add_parser("grid-section", help="Get grid lines inside a bounding box")
    gridSection.add_argument("south_west", type=parseCoordinate, help="South-west corner as LAT,LNG")
    gridSection.add_argument("north_east", type=parseCoordinate, help="North-east corner as LAT,LNG")

    subparsers.add_parser("languages", help="List available languages")

    args = parser.parse_args(argv)
    args.config = os.path.abspath(args.config)
    if args.config_dir:
        args.config_dir = [os.path.abspath(dirPath) for dirPath in args.config_dir]
    return args


def runCommand(client: What3WordsClient, args: argparse.Namespace) -> Any:
    """Execute parsed command and return printable result."""
    match args.command:
        case "to-3wa":
            coordinate = Coordinate(args.latitude, args.longitude)
            options = ConvertTo3waOptions(language=args.language, locale=args.locale)
            if args.words:
                return client.convertTo3waWords(coordinate, options)
            return client.convertTo3wa(coordinate, options)
        case "to-coords":
            options = ConvertToCoordinatesOptions(locale=args.locale)
            if args.floats:
                return list(client.convertToCoordinatesFloats(args.words, options))
            return client.convertToCoordinates(args.words, options)
        case "autosuggest":
            preferLand = None if args.prefer_land is None else args.prefer_land == "true"
            options = AutosuggestOptions(
                focus=args.focus,
                clipToCountry=args.country,
                language=args.language,
                preferLand=preferLand,
            )
            if args.words:
                return client.autosuggestWords(args.input, options)
            return client.autosuggest(args.input, options)
        case "grid-section":
            return client.gridSection(BoundingBox(args.south_west, args.north_east), GridSectionOptions())
        case "languages":
            return client.availableLanguages()
        case _:
            raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parseArguments(argv)
    configManager = ConfigManager(args.config, args.config_dir)
    initLogging(configManager.getLoggingConfig())
    try:
        client = createClient(configManager)
    except ValueError as e:
        logger.error(f"Invalid what3words configuration: {e}")
        return 1

    try:
        result = runCommand(client, args)
    except What3WordsError as e:
        logger.error(f"what3words request failed: {e}")
        return 1

    if isinstance(result, str):
        print(result)
    else:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
