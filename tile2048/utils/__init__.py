# -*- coding: utf-8 -*-
"""
This module provides helpers for the presentation layer.

It includes compact score formatting and id-based tile tracking between two boards.
"""

from .formatting import format_score
from .tracking import tile_movements, tile_positions

__all__ = ["format_score", "tile_positions", "tile_movements"]
