"""
Jump61 - Chain-reaction grid game engine with an automated opponent.

Provides:
- Board state with jump propagation and undo
- Read-only board views for observers
- Alpha-beta game-tree search
- Bot policies for automated play
"""

__version__ = "0.1.0"
