# worldsmith/services/world_service.py
import logging
from sqlalchemy.orm import Session
from sqlalchemy import or_
from typing import List, Optional, Dict, Any

from worldsmith.models.world import World
from worldsmith.models.user import User

logger = logging.getLogger(__name__)


class WorldService:
    """Service for handling world operations."""

    def __init__(self, db: Session):
        self.db = db

    def create_world(
        self,
        user_id: int,
        name: str,
        description: Optional[str] = None,
        image_url: Optional[str] = None
    ) -> Optional[World]:
        """
        Create a new world.

        Args:
            user_id: ID of the user creating the world (owner).
            name: Name of the world.
            description: Description of the world.
            image_url: Optional cover image.

        Returns:
            The created world, or None if the owner does not exist.
        """
        owner = self.db.query(User).filter(User.id == user_id).first()
        if not owner:
            return None

        world = World(
            name=name,
            description=description,
            image_url=image_url,
            user_id=user_id
        )
        self.db.add(world)
        self.db.commit()
        self.db.refresh(world)

        logger.info(f"Created world {world.id} ({world.name}) for user {user_id}")
        return world

    def get_world(self, world_id: int) -> Optional[World]:
        """Get a world by its ID."""
        return self.db.query(World).filter(World.id == world_id).first()

    def get_worlds(self, filters: Dict[str, Any] = None) -> List[World]:
        """
        Get worlds, oldest first.

        Args:
            filters: Optional 'user_id' and 'search' (name or description substring).
        """
        query = self.db.query(World)

        if filters:
            if 'user_id' in filters:
                query = query.filter(World.user_id == filters['user_id'])

            if filters.get('search'):
                search_term = f"%{filters['search']}%"
                query = query.filter(
                    or_(
                        World.name.ilike(search_term),
                        World.description.ilike(search_term)
                    )
                )

        return query.order_by(World.id).all()

    def update_world(self, world_id: int, update_data: Dict[str, Any]) -> Optional[World]:
        """
        Update a world's details.

        Returns:
            Updated world or None if not found.
        """
        world = self.get_world(world_id)
        if not world:
            return None

        for key, value in update_data.items():
            if key == "name" and value is None:
                continue  # name is required
            if hasattr(world, key):
                setattr(world, key, value)

        self.db.commit()
        self.db.refresh(world)
        return world

    def delete_world(self, world_id: int) -> bool:
        """
        Delete a world together with everything it owns.

        Returns:
            True if successful, False if the world does not exist.
        """
        world = self.get_world(world_id)
        if not world:
            return False

        self.db.delete(world)
        self.db.commit()

        logger.info(f"Deleted world {world_id}")
        return True
