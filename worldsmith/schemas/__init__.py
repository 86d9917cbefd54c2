"""
Schema definitions for the application.
This module exports all schemas for easy importing throughout the app.
"""

# Import from users
from worldsmith.schemas.users import (
    UserBase, UserCreate, UserResponse
)

# Import from worlds
from worldsmith.schemas.worlds import (
    WorldBase, WorldCreate, WorldUpdate, WorldResponse
)

# Import from regions
from worldsmith.schemas.regions import (
    RegionBase, RegionCreate, RegionUpdate, RegionResponse
)

# Import from locations
from worldsmith.schemas.locations import (
    LocationBase, LocationCreate, LocationUpdate, LocationResponse
)

# Import from characters
from worldsmith.schemas.characters import (
    CharacterBase, CharacterCreate, CharacterUpdate, CharacterResponse
)

# Import from creatures
from worldsmith.schemas.creatures import (
    CreatureBase, CreatureCreate, CreatureUpdate, CreatureResponse
)

# Import from spells
from worldsmith.schemas.spells import (
    SpellBase, SpellCreate, SpellUpdate, SpellResponse
)

# Import from lore
from worldsmith.schemas.lore import (
    LoreEntryBase, LoreEntryCreate, LoreEntryUpdate, LoreEntryResponse
)
