# worldsmith/database_seeder.py
import logging
from sqlalchemy.orm import Session
from typing import List, Optional

from worldsmith.database import SessionLocal
from worldsmith.models.user import User
from worldsmith.models.world import World
from worldsmith.models.region import Region
from worldsmith.models.location import Location
from worldsmith.models.character import Character
from worldsmith.models.creature import Creature
from worldsmith.models.spell import Spell
from worldsmith.models.lore_entry import LoreEntry
from worldsmith.models.enums import CharacterType, MarkerType
from worldsmith.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

SAMPLE_WORLD_NAME = "Eldoria"


def seed_user(db: Session) -> User:
    """Create the default game master account if one doesn't exist."""
    user = db.query(User).filter_by(username=settings.DEFAULT_USERNAME).first()
    if user:
        logger.info("Default user already exists")
        return user

    user = User(username=settings.DEFAULT_USERNAME)
    user.set_password(settings.DEFAULT_PASSWORD)
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Created default user {user.username}")
    return user


def seed_worlds(db: Session) -> List[World]:
    """Create the sample world."""
    worlds = db.query(World).all()
    if worlds:
        logger.info(f"Found {len(worlds)} existing worlds")
        return worlds

    owner = seed_user(db)

    world = World(
        name=SAMPLE_WORLD_NAME,
        description="A realm of ancient forests and smouldering peaks, still scarred by the Sundering.",
        user_id=owner.id
    )
    db.add(world)
    db.commit()
    db.refresh(world)

    logger.info(f"Created world: {world.name}")
    return [world]


def _sample_world(db: Session) -> Optional[World]:
    world = db.query(World).filter(World.name == SAMPLE_WORLD_NAME).first()
    if not world:
        logger.error(f"{SAMPLE_WORLD_NAME} not found, skipping sample content")
    return world


def seed_regions(db: Session) -> List[Region]:
    """Create regions within the sample world."""
    world = _sample_world(db)
    if not world:
        return []
    if world.regions:
        logger.info(f"Found {len(world.regions)} existing regions")
        return world.regions

    regions = [
        Region(
            name="Whispering Woods",
            description="An old-growth forest where the trees are said to remember every traveller.",
            type="Forest",
            world_id=world.id
        ),
        Region(
            name="Ashen Peaks",
            description="Volcanic mountains whose slopes are littered with the bones of would-be dragon slayers.",
            type="Mountains",
            world_id=world.id
        ),
    ]
    db.add_all(regions)
    db.commit()

    logger.info(f"Created {len(regions)} regions in {world.name}")
    return regions


def seed_locations(db: Session) -> List[Location]:
    """Place a few locations on the map."""
    world = _sample_world(db)
    if not world:
        return []
    existing = db.query(Location).join(Region).filter(Region.world_id == world.id).all()
    if existing:
        logger.info(f"Found {len(existing)} existing locations")
        return existing

    regions = {region.name: region for region in world.regions}
    if not regions:
        logger.error("No regions found, cannot create locations")
        return []

    locations = [
        Location(
            name="Thornwick Village",
            description="A sleepy hamlet at the edge of the woods where adventurers come looking for work.",
            location_type="Village",
            x=120,
            y=340,
            marker_type=MarkerType.QUEST,
            region_id=regions["Whispering Woods"].id
        ),
        Location(
            name="The Dragon's Maw",
            description="A cavern mouth belching smoke, lair of the red wyrmling Cinderfang.",
            location_type="Dungeon",
            x=410,
            y=90,
            marker_type=MarkerType.DANGER,
            region_id=regions["Ashen Peaks"].id
        ),
    ]
    db.add_all(locations)
    db.commit()

    logger.info(f"Created {len(locations)} locations")
    return locations


def seed_characters(db: Session) -> List[Character]:
    """Create a friendly face and a villain."""
    world = _sample_world(db)
    if not world:
        return []
    if world.characters:
        logger.info(f"Found {len(world.characters)} existing characters")
        return world.characters

    regions = {region.name: region for region in world.regions}
    village = db.query(Location).filter(Location.name == "Thornwick Village").first()

    characters = [
        Character(
            name="Elara Moonwhisper",
            description="Keeper of the woodland shrine and reluctant adviser to heroes.",
            appearance="Silver hair braided with ivy, eyes the colour of moss.",
            personality="Patient, wry, quietly fierce when the forest is threatened.",
            abilities=["Druidic Magic", "Beast Speech", "Herbalism"],
            race="Elf",
            character_type=CharacterType.ALLY,
            world_id=world.id,
            region_id=regions["Whispering Woods"].id if "Whispering Woods" in regions else None,
            location_id=village.id if village else None
        ),
        Character(
            name="Malakar the Grey",
            description="A disgraced archmage who seeks to bind Cinderfang to his will.",
            personality="Charming, patient and utterly without mercy.",
            abilities=["Necromancy", "Arcane Ward"],
            race="Human",
            character_type=CharacterType.VILLAIN,
            world_id=world.id
        ),
    ]
    db.add_all(characters)
    db.commit()

    logger.info(f"Created {len(characters)} characters")
    return characters


def seed_creatures(db: Session) -> List[Creature]:
    """Populate the bestiary."""
    world = _sample_world(db)
    if not world:
        return []
    if world.creatures:
        logger.info(f"Found {len(world.creatures)} existing creatures")
        return world.creatures

    regions = {region.name: region for region in world.regions}

    creatures = [
        Creature(
            name="Young Red Dragon",
            description="Cinderfang, a greedy young dragon nesting in the Ashen Peaks.",
            creature_type="Dragon",
            rarity="legendary",
            challenge_rating="10",
            armor_class=18,
            hit_points="178 (17d10 + 85)",
            speed="40 ft., climb 40 ft., fly 80 ft.",
            abilities={"STR": 23, "DEX": 10, "CON": 21, "INT": 14, "WIS": 11, "CHA": 19},
            special_attacks=["Fire Breath", "Multiattack"],
            element_type="Fire",
            world_id=world.id,
            region_id=regions["Ashen Peaks"].id if "Ashen Peaks" in regions else None
        ),
        Creature(
            name="Goblin",
            description="Small, cunning raiders who ambush travellers on the forest roads.",
            creature_type="Humanoid",
            rarity="common",
            challenge_rating="1/4",
            armor_class=15,
            hit_points="7 (2d6)",
            speed="30 ft.",
            abilities={"STR": 8, "DEX": 14, "CON": 10, "INT": 10, "WIS": 8, "CHA": 8},
            special_attacks=["Nimble Escape"],
            world_id=world.id
        ),
    ]
    db.add_all(creatures)
    db.commit()

    logger.info(f"Created {len(creatures)} creatures")
    return creatures


def seed_spells(db: Session) -> List[Spell]:
    """Fill the spellbook."""
    world = _sample_world(db)
    if not world:
        return []
    if world.spells:
        logger.info(f"Found {len(world.spells)} existing spells")
        return world.spells

    elara = db.query(Character).filter(Character.name == "Elara Moonwhisper").first()

    spells = [
        Spell(
            name="Fireball",
            level=3,
            school="Evocation",
            casting_time="1 action",
            range="150 feet",
            components="V, S, M (a tiny ball of bat guano and sulfur)",
            duration="Instantaneous",
            description="A bright streak flashes to a point you choose and blossoms into an explosion of flame.",
            world_id=world.id
        ),
        Spell(
            name="Thornwall",
            level=2,
            school="Conjuration",
            casting_time="1 action",
            range="60 feet",
            components="V, S",
            duration="Concentration, up to 10 minutes",
            description="A hedge of living thorns bursts from the ground, blocking passage.",
            world_id=world.id,
            creator_character_id=elara.id if elara else None
        ),
    ]
    db.add_all(spells)
    db.commit()

    logger.info(f"Created {len(spells)} spells")
    return spells


def seed_lore(db: Session) -> List[LoreEntry]:
    """Write the opening chapters of the world's history."""
    world = _sample_world(db)
    if not world:
        return []
    if world.lore_entries:
        logger.info(f"Found {len(world.lore_entries)} existing lore entries")
        return world.lore_entries

    entries = [
        LoreEntry(
            title="The Sundering",
            content="A thousand years ago the old empire tore the sky open and the peaks caught fire.",
            category="Historical Events",
            world_id=world.id
        ),
        LoreEntry(
            title="Order of the Silver Flame",
            content="Knights sworn to hunt dragons, now few in number and fewer in friends.",
            category="Factions & Organizations",
            world_id=world.id
        ),
    ]
    db.add_all(entries)
    db.commit()

    logger.info(f"Created {len(entries)} lore entries")
    return entries


def seed_database(db: Optional[Session] = None):
    """Seed the database with a sample campaign, skipping what already exists."""
    owns_session = db is None
    if owns_session:
        db = SessionLocal()
    try:
        logger.info("Starting database seeding...")
        seed_user(db)
        seed_worlds(db)
        seed_regions(db)
        seed_locations(db)
        seed_characters(db)
        seed_creatures(db)
        seed_spells(db)
        seed_lore(db)
        logger.info("Database seeding completed successfully")
    except Exception as e:
        logger.error(f"Error seeding database: {str(e)}")
        db.rollback()
        raise
    finally:
        if owns_session:
            db.close()
