"""
Input/Output utilities for rosters, exports and images.
"""

import json
import numpy as np
from pathlib import Path
from typing import Dict, Any, Optional, List, Union
from PIL import Image

from .units import Unit

REQUIRED_UNIT_KEYS = ('name', 'unit_type', 'health', 'base_attack', 'cost')


def load_json(file_path: Path) -> Optional[Union[Dict[str, Any], List[Any]]]:
    """
    Load JSON file safely.

    Args:
        file_path: Path to JSON file

    Returns:
        Parsed JSON data, or None if loading fails
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, ValueError) as e:  # ValueError covers JSON and UTF-8 decode errors
        print(f"Error loading JSON from {file_path}: {e}")
        return None


def save_json(data: Union[Dict[str, Any], List[Any]], file_path: Path, indent: int = 2) -> bool:
    """
    Save data to JSON file.

    Args:
        data: Data to save
        file_path: Path to save JSON file
        indent: JSON indentation

    Returns:
        True if successful, False otherwise
    """
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w') as f:
            json.dump(data, f, indent=indent)
        return True
    except (OSError, TypeError) as e:
        print(f"Error saving JSON to {file_path}: {e}")
        return False


def units_from_records(records: List[Dict[str, Any]]) -> List[Unit]:
    """
    Build units from plain dictionaries.

    Raises:
        ValueError: If a record is not an object, misses one of the required
            keys, or holds a field of the wrong type
    """
    units = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValueError(f"Unit record {index} is not an object")

        missing = [key for key in REQUIRED_UNIT_KEYS if key not in record]
        if missing:
            raise ValueError(f"Unit record {index} is missing {', '.join(missing)}")

        for key in ('attack_bonuses', 'defence_bonuses'):
            if not isinstance(record.get(key, {}), dict):
                raise ValueError(f"Unit record {index} has non-object {key}")

        try:
            units.append(Unit(
                name=str(record['name']),
                unit_type=str(record['unit_type']),
                health=int(record['health']),
                base_attack=int(record['base_attack']),
                cost=int(record['cost']),
                attack_type=str(record.get('attack_type', 'melee')),
                attack_bonuses=dict(record.get('attack_bonuses', {})),
                defence_bonuses=dict(record.get('defence_bonuses', {})),
                x=int(record.get('x', 0)),
                y=int(record.get('y', 0)),
                alive=bool(record.get('alive', True)),
            ))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Unit record {index} has an invalid field: {e}") from e
    return units


def units_to_records(units: List[Unit]) -> List[Dict[str, Any]]:
    """Convert units to JSON-friendly dictionaries."""
    return [
        {
            'name': unit.name,
            'unit_type': unit.unit_type,
            'health': unit.health,
            'base_attack': unit.base_attack,
            'cost': unit.cost,
            'attack_type': unit.attack_type,
            'attack_bonuses': dict(unit.attack_bonuses),
            'defence_bonuses': dict(unit.defence_bonuses),
            'x': unit.x,
            'y': unit.y,
            'alive': unit.alive,
        }
        for unit in units
    ]


def load_units(file_path: Path) -> Optional[List[Unit]]:
    """
    Load a roster or unit catalog from JSON.

    The file holds either a list of unit records or an object with a
    "units" list.

    Returns:
        List of units, or None if the file cannot be read

    Raises:
        ValueError: If the file content is not a list of unit records
    """
    data = load_json(file_path)
    if data is None:
        return None

    records = data.get('units') if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise ValueError(f"{file_path} does not contain a list of units")
    return units_from_records(records)


def save_image(image: np.ndarray, image_path: Path) -> bool:
    """
    Save numpy array as image.

    Args:
        image: Numpy array of image (H, W) or (H, W, 3)
        image_path: Path to save image

    Returns:
        True if successful, False otherwise
    """
    try:
        image_path.parent.mkdir(parents=True, exist_ok=True)
        # Convert to uint8 if needed
        if image.dtype != np.uint8:
            if image.max() <= 1.0:
                image = (image * 255).astype(np.uint8)
            else:
                image = image.astype(np.uint8)

        Image.fromarray(image).save(image_path)
        return True
    except (OSError, ValueError) as e:
        print(f"Error saving image to {image_path}: {e}")
        return False
