from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

class Genre(Enum):
    FANTASY = "Fantasy"
    MYSTERY = "Mystery"
    SCIFI = "SciFi"
    ROMANCE = "Romance"
    COMEDY = "Comedy"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_menu(cls, selection: str) -> "Genre":
        """Map a 1-based menu number ("1".."5") to a genre."""
        members = list(cls)
        try:
            index = int(selection.strip())
        except ValueError:
            raise ValueError(f"Not a genre number: {selection!r}") from None
        if not 1 <= index <= len(members):
            raise ValueError(f"Genre number out of range: {index}")
        return members[index - 1]

class Stage(Enum):
    INTRODUCTION = "Introduction"            # set scene, introduce characters
    ACTION_CONFLICT = "ActionConflict"       # main challenge, rising tension
    AMBIGUITY_MYSTERY = "AmbiguityMystery"   # unpredictable paths, twists
    CLIMAX_RESOLUTION = "ClimaxResolution"   # peak conflict and conclusion
    END = "End"

    def __str__(self) -> str:
        return self.value

@dataclass(frozen=True)
class StoryState:
    """
    One snapshot of the session: genre, current stage, every segment shown so
    far, the latest segment and the choices offered with it.

    States are replaced, never mutated; use dataclasses.replace to derive
    the next one.
    """
    genre: Genre
    current_stage: Stage = Stage.INTRODUCTION
    history: Tuple[str, ...] = field(default_factory=tuple)
    current_text: str = ""
    choices: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_finished(self) -> bool:
        return self.current_stage is Stage.END
