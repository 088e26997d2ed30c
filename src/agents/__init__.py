"""
Minesweeper agents module.

Provides programmatic players for the Minesweeper environment:
- RandomAgent: Baseline random selection
- Evaluator: Plays games with agents and aggregates the results
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .evaluator import Evaluator

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "Evaluator",
]
