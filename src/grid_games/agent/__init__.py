"""
Agent module - players and how they are controlled.
"""

from grid_games.agent.agent import AI_NAME, ControlMode, Player

__all__ = ["AI_NAME", "ControlMode", "Player"]
