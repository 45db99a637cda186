"""
Configuration & Resource Management
===================================
Central registry for resource paths and the constants shared by the
sampling pipeline and the views.

Resources (the example presets) live inside the package so they are found
both in development and when installed. When frozen with PyInstaller they
are resolved relative to sys._MEIPASS instead.

Exports:
    RESOURCES_PATH (str): Absolute path to the bundled resources directory.
    EXAMPLES_PATH (str): Absolute path to the example presets file.
"""
import os
import sys
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to a bundled resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, "revolutionviewer", "resources", relative_path)

    # config.py is in src/revolutionviewer/
    package_root: Path = Path(__file__).parent
    return os.path.join(str(package_root), "resources", relative_path)


RESOURCES_PATH: str = get_resource_path("")
EXAMPLES_PATH: str = get_resource_path("examples.json")

# --- Sampling ---
CURVE_SEGMENTS: int = 100     # subdivisions of [A, B] for the 2D curves
RADIAL_SEGMENTS: int = 60     # subdivisions of [A, B] and of 360 deg for the solids

# --- Interval ---
DEFAULT_LIMIT_A: float = -1.0
DEFAULT_LIMIT_B: float = 3.0

# --- Colours ---
SINGLE_CURVE_COLOR: str = "#FF6600"
SINGLE_CURVE_WIDTH: float = 5.0
MULTI_CURVE_WIDTH: float = 4.0
CURVE_PALETTE: tuple[str, ...] = ("#FF6600", "#007BFF", "#28A745", "#6F42C1")

# (X solid, Y solid) colour per formula slot
SOLID_COLORS: tuple[tuple[str, str], ...] = (
    ("#007BFF", "#28A745"),
    ("#FF1493", "#00CED1"),
)
SOLID_OPACITY: float = 0.7

# --- Scene ---
AXIS_LENGTH: float = 7.0
AXIS_LABEL_OFFSET: float = 0.5
BACKGROUND_COLOR: str = "#F0F0F0"
FRUSTUM_SIZE: float = 18.0                              # visible height of the 2D view
CAMERA_POSITION_3D: tuple[float, float, float] = (1.0, 5.0, 12.0)
CAMERA_VIEW_ANGLE_3D: float = 75.0
LIGHT_POSITION: tuple[float, float, float] = (5.0, 5.0, 5.0)

# --- Render loop ---
FRAME_INTERVAL_MS: int = 16
