"""
API - Serializable views of engine state for display layers.
"""

from .schemas import SideName, SquareInfo, BoardSnapshot, DecisionInfo

__all__ = [
    "SideName",
    "SquareInfo",
    "BoardSnapshot",
    "DecisionInfo",
]
