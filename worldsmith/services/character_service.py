# worldsmith/services/character_service.py
import logging
from sqlalchemy.orm import Session
from sqlalchemy import or_
from typing import List, Optional, Dict, Any

from worldsmith.models.character import Character
from worldsmith.models.location import Location
from worldsmith.services.region_service import RegionService
from worldsmith.services.location_service import LocationService

logger = logging.getLogger(__name__)


class CharacterService:
    """Service for handling character operations"""

    def __init__(self, db: Session):
        self.db = db
        self.region_service = RegionService(db)
        self.location_service = LocationService(db)

    def references_valid(self,
                         world_id: int,
                         region_id: Optional[int] = None,
                         location_id: Optional[int] = None) -> bool:
        """
        Check the optional region and location references.

        Both must belong to the character's world, and a location given
        together with a region must lie inside that region.
        """
        if region_id is not None and not self.region_service.region_in_world(region_id, world_id):
            return False

        if location_id is not None:
            if not self.location_service.location_in_world(location_id, world_id):
                return False
            if region_id is not None:
                location = self.db.query(Location).filter(Location.id == location_id).first()
                if location.region_id != region_id:
                    return False

        return True

    def create_character(self, character_data: Dict[str, Any]) -> Optional[Character]:
        """
        Create a new character.

        Args:
            character_data: Column values; 'world_id' is required

        Returns:
            Created character or None if a region or location reference is invalid
        """
        if not self.references_valid(
            character_data["world_id"],
            character_data.get("region_id"),
            character_data.get("location_id")
        ):
            return None

        character = Character(**character_data)

        self.db.add(character)
        self.db.commit()
        self.db.refresh(character)

        logger.info(f"Created character {character.id} ({character.name}) in world {character.world_id}")
        return character

    def get_character(self, character_id: int) -> Optional[Character]:
        """Get a character by ID"""
        return self.db.query(Character).filter(Character.id == character_id).first()

    def character_in_world(self, character_id: int, world_id: int) -> bool:
        """Check that a character exists and belongs to the given world"""
        return self.db.query(Character).filter(
            Character.id == character_id,
            Character.world_id == world_id
        ).first() is not None

    def get_characters(self, filters: Dict[str, Any] = None) -> List[Character]:
        """
        Get characters with optional filters.

        Args:
            filters: 'world_id', 'region_id', 'location_id', 'character_type'
                and 'search' (name or description)
        """
        query = self.db.query(Character)

        if filters:
            if 'world_id' in filters:
                query = query.filter(Character.world_id == filters['world_id'])

            if 'region_id' in filters:
                query = query.filter(Character.region_id == filters['region_id'])

            if 'location_id' in filters:
                query = query.filter(Character.location_id == filters['location_id'])

            if filters.get('character_type'):
                query = query.filter(Character.character_type == filters['character_type'])

            if filters.get('search'):
                search_term = f"%{filters['search']}%"
                query = query.filter(
                    or_(
                        Character.name.ilike(search_term),
                        Character.description.ilike(search_term)
                    )
                )

        return query.order_by(Character.id).all()

    def update_character(self, character_id: int, update_data: Dict[str, Any]) -> Optional[Character]:
        """
        Update a character's details.

        Returns:
            Updated character or None if not found or a new reference is invalid.
        """
        character = self.get_character(character_id)
        if not character:
            return None

        region_id = update_data.get('region_id', character.region_id)
        location_id = update_data.get('location_id', character.location_id)
        if ('region_id' in update_data or 'location_id' in update_data) and \
                not self.references_valid(character.world_id, region_id, location_id):
            return None

        for key, value in update_data.items():
            if key in ("name", "character_type") and value is None:
                continue
            if hasattr(character, key):
                setattr(character, key, value)

        self.db.commit()
        self.db.refresh(character)
        return character

    def delete_character(self, character_id: int) -> bool:
        """Delete a character; spells they created are kept with no creator"""
        character = self.get_character(character_id)
        if not character:
            return False

        self.db.delete(character)
        self.db.commit()
        return True
