"""
Model definitions for the application.
Importing this package registers every table on the shared metadata.
"""

from worldsmith.models.enums import CharacterType, MarkerType
from worldsmith.models.user import User
from worldsmith.models.world import World
from worldsmith.models.region import Region
from worldsmith.models.location import Location
from worldsmith.models.character import Character
from worldsmith.models.creature import Creature
from worldsmith.models.spell import Spell
from worldsmith.models.lore_entry import LoreEntry
