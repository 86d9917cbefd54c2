# worldsmith/services/creature_service.py
import logging
from sqlalchemy.orm import Session
from sqlalchemy import or_
from typing import List, Optional, Dict, Any

from worldsmith.models.creature import Creature
from worldsmith.services.region_service import RegionService

logger = logging.getLogger(__name__)


class CreatureService:
    """Service for handling bestiary operations"""

    def __init__(self, db: Session):
        self.db = db
        self.region_service = RegionService(db)

    def create_creature(self, creature_data: Dict[str, Any]) -> Optional[Creature]:
        """
        Create a new creature.

        Returns:
            The created creature or None if the region is not part of the world.
        """
        region_id = creature_data.get("region_id")
        if region_id is not None and \
                not self.region_service.region_in_world(region_id, creature_data["world_id"]):
            return None

        creature = Creature(**creature_data)

        self.db.add(creature)
        self.db.commit()
        self.db.refresh(creature)

        logger.info(f"Created creature {creature.id} ({creature.name}) in world {creature.world_id}")
        return creature

    def get_creature(self, creature_id: int) -> Optional[Creature]:
        """Get a creature by ID"""
        return self.db.query(Creature).filter(Creature.id == creature_id).first()

    def get_creatures(self, filters: Dict[str, Any] = None) -> List[Creature]:
        """
        Get creatures with optional filters.

        Args:
            filters: 'world_id', 'region_id', 'rarity', 'creature_type',
                'element_type' and 'search' (name or description)
        """
        query = self.db.query(Creature)

        if filters:
            if 'world_id' in filters:
                query = query.filter(Creature.world_id == filters['world_id'])

            if 'region_id' in filters:
                query = query.filter(Creature.region_id == filters['region_id'])

            if filters.get('rarity'):
                query = query.filter(Creature.rarity == filters['rarity'])

            if filters.get('creature_type'):
                query = query.filter(Creature.creature_type == filters['creature_type'])

            if filters.get('element_type'):
                query = query.filter(Creature.element_type == filters['element_type'])

            if filters.get('search'):
                search_term = f"%{filters['search']}%"
                query = query.filter(
                    or_(
                        Creature.name.ilike(search_term),
                        Creature.description.ilike(search_term)
                    )
                )

        return query.order_by(Creature.id).all()

    def update_creature(self, creature_id: int, update_data: Dict[str, Any]) -> Optional[Creature]:
        """
        Update a creature's stat block.

        Returns:
            Updated creature or None if not found or the new region is invalid.
        """
        creature = self.get_creature(creature_id)
        if not creature:
            return None

        region_id = update_data.get('region_id')
        if region_id is not None and not self.region_service.region_in_world(region_id, creature.world_id):
            return None

        for key, value in update_data.items():
            if key in ("name", "world_id") and value is None:
                continue
            if hasattr(creature, key):
                setattr(creature, key, value)

        self.db.commit()
        self.db.refresh(creature)
        return creature

    def delete_creature(self, creature_id: int) -> bool:
        """Delete a creature"""
        creature = self.get_creature(creature_id)
        if not creature:
            return False

        self.db.delete(creature)
        self.db.commit()
        return True
