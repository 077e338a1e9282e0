# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `TwentyFortyEight` class, which runs a game session on top of the core logic.
"""

from .config import GameConfig
from .game import TurnResult, TwentyFortyEight

__all__ = ["GameConfig", "TurnResult", "TwentyFortyEight"]
