"""
isometric_projection/config.py

Construction-time configuration for IsometricProjection.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping

from isometric_projection.projection import IsometricProjection
from isometric_projection.validation import ValidationError


@dataclass
class ProjectionConfig:
    """Tile size parameters for building a projection."""

    tile_width: float = 28.0
    tile_height: float = 28.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectionConfig":
        """
        Build a config from a plain mapping, e.g. parsed JSON.

        Raises
        ------
        ValidationError
            If the mapping contains unknown keys.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError(f"Unknown projection config keys: {', '.join(unknown)}")
        return cls(**dict(data))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def build(self) -> IsometricProjection:
        """Create the projection described by this config."""
        return IsometricProjection(self.tile_width, self.tile_height)
