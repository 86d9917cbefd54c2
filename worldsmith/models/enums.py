# worldsmith/models/enums.py
import enum


class CharacterType(str, enum.Enum):
    NPC = "npc"
    ALLY = "ally"
    VILLAIN = "villain"


class MarkerType(str, enum.Enum):
    STANDARD = "standard"
    QUEST = "quest"
    DANGER = "danger"
