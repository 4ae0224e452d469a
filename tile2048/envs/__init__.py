# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `GameSession` class, which runs one game turn by turn with history and rewind.
"""

from .session import GameSession

__all__ = ["GameSession"]
