"""
Bots module - Automated players.

Provides:
- PlayerPolicy: Interface for move selection
- StaticEvaluator: Scores leaf positions
- search_for_move: Alpha-beta game-tree search
- AIPlayer: Search-driven opponent
"""

from .policy import PlayerPolicy, BotDecision, RandomPolicy, FirstLegalPolicy
from .evaluator import StaticEvaluator, EvaluationWeights
from .search import (
    SearchLimits,
    SearchResult,
    SearchStats,
    choose_move,
    full_minimax,
    minimax,
    search_for_move,
)
from .ai_player import AIPlayer

__all__ = [
    "PlayerPolicy",
    "BotDecision",
    "RandomPolicy",
    "FirstLegalPolicy",
    "StaticEvaluator",
    "EvaluationWeights",
    "SearchLimits",
    "SearchResult",
    "SearchStats",
    "choose_move",
    "full_minimax",
    "minimax",
    "search_for_move",
    "AIPlayer",
]
