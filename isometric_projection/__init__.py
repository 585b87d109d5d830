"""
isometric_projection

Conversion between integer 3D grid coordinates and isometric screen space.

The projection is an immutable value built from a tile size. It maps grid
cells to screen positions and back, and the round trip is exact for every
integer grid coordinate.

Modules
-------
projection:
    IsometricProjection : world_to_screen / screen_to_world for a tile size
coords:
    GridCoord : integer (x, y, z) grid cell
    ScreenCoord : float (x, y) screen position plus depth
config:
    ProjectionConfig : tile size settings that build a projection
validation:
    ValidationError : raised on invalid tile sizes or coordinates
"""

from isometric_projection.coords import GRID_MAX, GRID_MIN, GridCoord, ScreenCoord
from isometric_projection.projection import IsometricProjection, round_half_away
from isometric_projection.config import ProjectionConfig
from isometric_projection.validation import ValidationError

__all__ = [
    # Coordinates
    "GridCoord",
    "ScreenCoord",
    "GRID_MIN",
    "GRID_MAX",
    # Projection
    "IsometricProjection",
    "round_half_away",
    # Configuration
    "ProjectionConfig",
    # Validation
    "ValidationError",
]
