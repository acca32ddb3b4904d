"""
A class representing a player: who they are, how they are controlled,
and how many games they have won.
"""

from dataclasses import dataclass
from enum import Enum, auto

AI_NAME = "HAL"


class ControlMode(Enum):
    HUMAN = auto()
    AI = auto()


@dataclass
class Player:
    _name: str = "P1"  # Label shown in prompts and on the scoreboard
    _marker: str = "X"  # Printable token that represents the player on the board (one or more characters)
    _control: ControlMode = ControlMode.HUMAN  # Whether moves come from input or the random AI
    _wins: int = 0  # Games won this session; never persisted

    def __post_init__(self):
        self.marker = self._marker

    @classmethod
    def human(cls, name: str, marker: str) -> "Player":
        return cls(name, marker, ControlMode.HUMAN)

    @classmethod
    def ai(cls, marker: str) -> "Player":
        return cls(AI_NAME, marker, ControlMode.AI)

    @property
    def name(self) -> str:
        """Returns the player's name."""
        return self._name

    @property
    def marker(self) -> str:
        """Returns the player's board token."""
        return self._marker

    @marker.setter
    def marker(self, value: str):
        """Sets the player's board token. Blank tokens would look like an empty cell."""
        if not value or not value.strip():
            raise ValueError("Marker must contain at least one visible character")
        self._marker = value

    @property
    def control(self) -> ControlMode:
        """Returns how the player is controlled."""
        return self._control

    @property
    def is_ai(self) -> bool:
        return self._control is ControlMode.AI

    @property
    def wins(self) -> int:
        """Returns the number of games won."""
        return self._wins

    def update_wins(self, amount: int = 1) -> None:
        self._wins += amount

    def reset(self) -> None:
        """Zero the win counter."""
        self._wins = 0

    def __str__(self) -> str:
        return f"{self._name}: {self._wins} wins"
