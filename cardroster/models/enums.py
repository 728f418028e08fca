from enum import Enum


class RosterMode(str, Enum):
    TEAMS = "teams"
    PAIRS = "pairs"


class PlayerRole(str, Enum):
    CAPTAIN = "captain"
    COACH = "coach"
    NPC = "npc"
    PLAYER = ""  # No special role


class TableShape(str, Enum):
    """Whether a registration table carries an explicit ID column."""

    HAS_ID_COLUMN = "HasIdColumn"
    NO_ID_COLUMN = "NoIdColumn"
