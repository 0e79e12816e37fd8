"""
Tests for the destination registry
"""

import json
import tempfile
from pathlib import Path

import pytest

from airportfinder.journeys.destinations import (
    DEFAULT_DESTINATIONS,
    DestinationConfigError,
    load_destinations,
)
from airportfinder.journeys.models import Destination


def write_temp(content: str, suffix: str) -> Path:
    with tempfile.NamedTemporaryFile(mode='w', suffix=suffix, delete=False) as f:
        f.write(content)
    return Path(f.name)


class TestDefaultDestinations:
    """Test built-in airports"""

    def test_default_airports(self):
        """Test the six London airports in order"""
        assert [d.name for d in DEFAULT_DESTINATIONS] == [
            "Heathrow", "Gatwick", "Stansted", "Luton", "London City", "Southend"
        ]
        assert DEFAULT_DESTINATIONS[1].location_token == "920GLGW0"
        assert DEFAULT_DESTINATIONS[0].location_token == "51.471618,-0.454037"

    def test_default_airports_immutable(self):
        """Test the registry is a tuple"""
        assert isinstance(DEFAULT_DESTINATIONS, tuple)


class TestLoadDestinations:
    """Test loading destinations from files"""

    def test_load_yaml(self):
        """Test loading a YAML destinations file"""
        path = write_temp(
            """
            destinations:
              - name: "Heathrow"
                location_token: "51.471618,-0.454037"
              - name: "Gatwick"
                location_token: "920GLGW0"
            """,
            ".yaml"
        )

        destinations = load_destinations(path)

        assert destinations == (
            Destination(name="Heathrow", location_token="51.471618,-0.454037"),
            Destination(name="Gatwick", location_token="920GLGW0"),
        )

    def test_load_json(self):
        """Test loading a JSON destinations file"""
        path = write_temp(
            json.dumps({"destinations": [{"name": "Luton", "location_token": "910GLUTOAPY"}]}),
            ".json"
        )

        destinations = load_destinations(path)

        assert len(destinations) == 1
        assert destinations[0].name == "Luton"

    def test_load_empty_list(self):
        """Test an empty destination list is allowed"""
        path = write_temp("destinations: []\n", ".yml")

        assert load_destinations(path) == ()

    def test_missing_file(self):
        """Test a missing file"""
        with pytest.raises(DestinationConfigError, match="not found"):
            load_destinations(Path("/nonexistent/destinations.yaml"))

    def test_unsupported_format(self):
        """Test an unsupported extension"""
        path = write_temp("Heathrow", ".txt")

        with pytest.raises(DestinationConfigError, match="Unsupported file format"):
            load_destinations(path)

    def test_invalid_yaml(self):
        """Test YAML syntax errors"""
        path = write_temp("destinations: [unclosed", ".yaml")

        with pytest.raises(DestinationConfigError, match="Invalid YAML syntax"):
            load_destinations(path)

    def test_missing_destinations_key(self):
        """Test files without a destinations list"""
        path = write_temp("airports: []\n", ".yaml")

        with pytest.raises(DestinationConfigError, match="'destinations' list"):
            load_destinations(path)

    def test_invalid_entry(self):
        """Test entries missing a location token"""
        path = write_temp("destinations:\n  - name: Heathrow\n", ".yaml")

        with pytest.raises(DestinationConfigError, match="Invalid destination entry"):
            load_destinations(path)

    def test_directory_path(self):
        """Test a directory in place of a file"""
        directory = Path(tempfile.mkdtemp()) / "airports.yaml"
        directory.mkdir()

        with pytest.raises(DestinationConfigError, match="Error reading file"):
            load_destinations(directory)

    def test_non_utf8_file(self):
        """Test a file that is not UTF-8 encoded"""
        with tempfile.NamedTemporaryFile(mode='wb', suffix='.yaml', delete=False) as f:
            f.write(b"destinations:\n  - name: \xff\xfe\n")

        with pytest.raises(DestinationConfigError, match="Error reading file"):
            load_destinations(Path(f.name))
