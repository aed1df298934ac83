"""
Minesweeper agents module.

Provides programmatic players for the Gymnasium environment:
- BaseAgent: Abstract player interface
- RandomAgent: Baseline random selection
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
