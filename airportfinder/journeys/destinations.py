"""
Destination registry
Airports reachable from a London-area origin, optionally loaded from YAML or JSON
"""

import json
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml
from pydantic import ValidationError

from .models import Destination


class DestinationConfigError(Exception):
    """Destination file loading error"""
    pass


DEFAULT_DESTINATIONS: Tuple[Destination, ...] = (
    Destination(name="Heathrow", location_token="51.471618,-0.454037"),
    Destination(name="Gatwick", location_token="920GLGW0"),
    Destination(name="Stansted", location_token="920GSTN1"),
    Destination(name="Luton", location_token="910GLUTOAPY"),
    Destination(name="London City", location_token="51.503419,0.048749"),
    Destination(name="Southend", location_token="51.56867,0.70505"),
)


def _read_file(file_path: Path) -> Dict[str, Any]:
    suffix = file_path.suffix.lower()
    content = file_path.read_text(encoding='utf-8')

    if suffix in ['.yaml', '.yml']:
        return yaml.safe_load(content) or {}
    elif suffix == '.json':
        return json.loads(content)
    raise DestinationConfigError(f"Unsupported file format: {suffix}")


def load_destinations(file_path: Path) -> Tuple[Destination, ...]:
    """
    Load destinations from a YAML or JSON file

    The file must contain a ``destinations`` list of
    ``{name, location_token}`` entries, kept in file order.

    Args:
        file_path: Path to the destinations file

    Returns:
        Tuple of Destination records

    Raises:
        DestinationConfigError: If the file is missing or invalid
    """
    if not file_path.exists():
        raise DestinationConfigError(f"Destinations file not found: {file_path}")

    try:
        data = _read_file(file_path)
    except yaml.YAMLError as e:
        raise DestinationConfigError(f"Invalid YAML syntax: {e}")
    except json.JSONDecodeError as e:
        raise DestinationConfigError(f"Invalid JSON syntax: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise DestinationConfigError(f"Error reading file: {e}")

    entries = data.get("destinations") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise DestinationConfigError("Destinations file must contain a 'destinations' list")

    try:
        return tuple(Destination(**entry) for entry in entries)
    except (TypeError, ValidationError) as e:
        raise DestinationConfigError(f"Invalid destination entry: {e}")
