"""
Unit tests for what3words endpoint options
"""

import pytest

from lib.what3words.geometry import BoundingBox, Circle, Coordinate, Polygon
from lib.what3words.options import (
    AutosuggestOptions,
    ConvertTo3waOptions,
    ConvertToCoordinatesOptions,
    GridSectionOptions,
)


@pytest.mark.parametrize(
    "options",
    [ConvertTo3waOptions(), ConvertToCoordinatesOptions(), AutosuggestOptions(), GridSectionOptions()],
)
def test_empty_options_produce_no_params(options):
    """Test options with all fields absent add nothing to the query, dood!"""
    assert options.toParams() == {}


def test_convert_to_3wa_options():
    options = ConvertTo3waOptions(language="de", format="geojson", locale="de_DE")

    assert options.toParams() == {"language": "de", "format": "geojson", "locale": "de_DE"}


def test_convert_to_3wa_options_partial():
    """Test only present fields are rendered."""
    assert ConvertTo3waOptions(locale="mn_la").toParams() == {"locale": "mn_la"}


def test_convert_to_coordinates_options():
    options = ConvertToCoordinatesOptions(format="json", locale="zh_tr")

    assert options.toParams() == {"format": "json", "locale": "zh_tr"}


def test_grid_section_options():
    assert GridSectionOptions(format="geojson").toParams() == {"format": "geojson"}


def test_invalid_format_rejected():
    """Test unsupported formats raise ValueError, dood!"""
    with pytest.raises(ValueError, match="Unsupported format"):
        ConvertTo3waOptions(format="xml")
    with pytest.raises(ValueError):
        ConvertToCoordinatesOptions(format="csv")
    with pytest.raises(ValueError):
        GridSectionOptions(format="")


def test_autosuggest_options_all_fields():
    """Test autosuggest options render every parameter in order, dood!"""
    focus = Coordinate(51.4243877, -0.34745)
    circle = Circle(Coordinate(51.0, -0.5), 10.0)
    boundingBox = BoundingBox(Coordinate(51.0, -1.0), Coordinate(52.0, 0.0))
    polygon = Polygon.fromPoints([Coordinate(51.0, -1.0), Coordinate(52.0, -1.0), Coordinate(52.0, 0.0)])

    options = AutosuggestOptions(
        focus=focus,
        clipToCircle=circle,
        clipToCountry="GB",
        clipToBoundingBox=boundingBox,
        clipToPolygon=polygon,
        language="en",
        preferLand=False,
        locale="en_GB",
    )
    params = options.toParams()

    assert list(params.keys()) == [
        "focus",
        "clip-to-circle",
        "clip-to-country",
        "clip-to-bounding-box",
        "clip-to-polygon",
        "language",
        "prefer-land",
        "locale",
    ]
    assert params["focus"] == "51.4243877,-0.34745"
    assert params["clip-to-circle"] == "51.0,-0.5,10.0"
    assert params["clip-to-country"] == "GB"
    assert params["clip-to-bounding-box"] == "51.0,-1.0,52.0,0.0"
    assert params["clip-to-polygon"] == "51.0,-1.0,52.0,-1.0,52.0,0.0,51.0,-1.0"
    assert params["prefer-land"] == "false"


def test_autosuggest_prefer_land_true():
    assert AutosuggestOptions(preferLand=True).toParams() == {"prefer-land": "true"}


def test_autosuggest_country_list():
    """Test a list of country codes is comma-joined."""
    options = AutosuggestOptions(clipToCountry=["GB", "FR", "DE"])

    assert options.toParams() == {"clip-to-country": "GB,FR,DE"}


@pytest.mark.parametrize("countries", ["", [], ()])
def test_autosuggest_empty_country_omitted(countries):
    """Test an empty country list does not send an empty clip-to-country, dood!"""
    assert AutosuggestOptions(clipToCountry=countries).toParams() == {}
