"""
tests/test_config.py

Unit tests for ProjectionConfig.
"""

import json
import logging

import pytest

from isometric_projection import IsometricProjection, ProjectionConfig, ValidationError


class TestProjectionConfig:
    """Tests for ProjectionConfig."""

    def test_defaults(self):
        """Test default tile size builds the 14/14 half-tile projection."""
        config = ProjectionConfig()
        assert config.build() == IsometricProjection.from_half_tile(14, 14)

    def test_from_dict(self):
        """Test building from a parsed JSON mapping."""
        config = ProjectionConfig.from_dict(json.loads('{"tile_width": 64, "tile_height": 32}'))
        proj = config.build()
        assert proj.tile_size == (64.0, 32.0)

    def test_partial_dict_uses_defaults(self):
        """Test that missing keys fall back to defaults."""
        config = ProjectionConfig.from_dict({"tile_height": 16})
        assert config.tile_width == 28.0
        assert config.tile_height == 16

    def test_unknown_keys_raise(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(ValidationError, match="tile_depth"):
            ProjectionConfig.from_dict({"tile_width": 64, "tile_depth": 8})

    def test_to_dict_round_trip(self):
        """Test that to_dict output rebuilds the same config."""
        config = ProjectionConfig(tile_width=48.0, tile_height=24.0)
        assert ProjectionConfig.from_dict(config.to_dict()) == config

    def test_invalid_size_fails_on_build(self):
        """Test that validation happens when the projection is built."""
        config = ProjectionConfig(tile_width=0.0)
        with pytest.raises(ValidationError):
            config.build()

    def test_build_logs_tile_size(self, caplog):
        """Test that construction emits a debug record."""
        with caplog.at_level(logging.DEBUG, logger="isometric_projection.projection"):
            ProjectionConfig(tile_width=64, tile_height=32).build()
        assert "64x32" in caplog.text
