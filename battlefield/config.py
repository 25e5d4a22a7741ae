"""
Configuration utilities and default settings.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class FieldConfig:
    """Fixed battlefield dimensions."""
    width: int = 27
    height: int = 21


@dataclass
class PresetConfig:
    """Configuration for army preset generation."""
    max_units_per_type: int = 11
    deploy_width: int = 3  # Columns available for initial placement


@dataclass
class BattleConfig:
    """Configuration for battle simulation."""
    max_rounds: int = 1000


@dataclass
class VisualizationConfig:
    """Configuration for battlefield rendering."""
    cell_pixels: int = 16
    colors: Dict[str, Tuple[int, int, int]] = field(default_factory=lambda: {
        'free': (0, 255, 0),
        'occupied': (255, 0, 0),
        'path': (0, 255, 255),
        'mover': (255, 255, 255),
        'target': (255, 0, 255),
    })


# Default configurations
DEFAULT_FIELD_CONFIG = FieldConfig()
DEFAULT_PRESET_CONFIG = PresetConfig()
DEFAULT_BATTLE_CONFIG = BattleConfig()
DEFAULT_VISUALIZATION_CONFIG = VisualizationConfig()

FIELD_WIDTH = DEFAULT_FIELD_CONFIG.width
FIELD_HEIGHT = DEFAULT_FIELD_CONFIG.height


def get_output_dir(base_dir: Path, run_name: Optional[str] = None) -> Path:
    """
    Get standardized output directory path.

    Args:
        base_dir: Base output directory
        run_name: Optional run name for subdirectory

    Returns:
        Path to output directory
    """
    if run_name:
        return base_dir / f"output_{run_name}"
    return base_dir / "output"


def get_images_dir(output_dir: Path) -> Path:
    """Get rendered images directory path."""
    return output_dir / "images"


def get_json_dir(output_dir: Path) -> Path:
    """Get JSON data directory path."""
    return output_dir / "json"
