"""
Grid pathfinding and battle utilities for a turn-based tactical simulator.
"""

from .units import Unit, Army
from .occupancy import build_occupancy_mask, occupancy_stats, reachable_region
from .graph import Node, build_graph, is_within_bounds
from .pathfinding import find_path, search, reconstruct_path, path_length, advance_along_path
from .targeting import find_suitable_units, group_units_by_row
from .presets import generate_preset, assign_coordinates, mirror_to_right_flank
from .simulation import BattleResult, simulate_battle, strike, print_battle_log
from .visualization import (
    create_battlefield_image,
    setup_battlefield_viewer_blueprint,
    log_battlefield
)
from .config import (
    FieldConfig,
    PresetConfig,
    BattleConfig,
    VisualizationConfig,
    DEFAULT_FIELD_CONFIG,
    DEFAULT_PRESET_CONFIG,
    DEFAULT_BATTLE_CONFIG,
    DEFAULT_VISUALIZATION_CONFIG,
    FIELD_WIDTH,
    FIELD_HEIGHT,
    get_output_dir,
    get_images_dir,
    get_json_dir
)
from .io_utils import (
    load_json,
    save_json,
    load_units,
    units_from_records,
    units_to_records,
    save_image
)

__all__ = [
    # Units
    'Unit',
    'Army',
    # Occupancy
    'build_occupancy_mask',
    'occupancy_stats',
    'reachable_region',
    # Graph
    'Node',
    'build_graph',
    'is_within_bounds',
    # Pathfinding
    'find_path',
    'search',
    'reconstruct_path',
    'path_length',
    'advance_along_path',
    # Targeting
    'find_suitable_units',
    'group_units_by_row',
    # Presets
    'generate_preset',
    'assign_coordinates',
    'mirror_to_right_flank',
    # Simulation
    'BattleResult',
    'simulate_battle',
    'strike',
    'print_battle_log',
    # Visualization
    'create_battlefield_image',
    'setup_battlefield_viewer_blueprint',
    'log_battlefield',
    # Config
    'FieldConfig',
    'PresetConfig',
    'BattleConfig',
    'VisualizationConfig',
    'DEFAULT_FIELD_CONFIG',
    'DEFAULT_PRESET_CONFIG',
    'DEFAULT_BATTLE_CONFIG',
    'DEFAULT_VISUALIZATION_CONFIG',
    'FIELD_WIDTH',
    'FIELD_HEIGHT',
    'get_output_dir',
    'get_images_dir',
    'get_json_dir',
    # IO utilities
    'load_json',
    'save_json',
    'load_units',
    'units_from_records',
    'units_to_records',
    'save_image',
]
