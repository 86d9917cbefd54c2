# worldsmith/services/region_service.py
import logging
from sqlalchemy.orm import Session
from sqlalchemy import or_
from typing import List, Optional, Dict, Any

from worldsmith.models.region import Region
from worldsmith.models.world import World

logger = logging.getLogger(__name__)


class RegionService:
    """Service for handling region operations"""

    def __init__(self, db: Session):
        self.db = db

    def create_region(self,
                      world_id: int,
                      name: str,
                      description: Optional[str] = None,
                      image_url: Optional[str] = None,
                      type: Optional[str] = None) -> Optional[Region]:
        """
        Create a new region

        Returns:
            The created region or None if the world does not exist.
        """
        world = self.db.query(World).filter(World.id == world_id).first()
        if not world:
            return None

        region = Region(
            name=name,
            description=description,
            image_url=image_url,
            type=type,
            world_id=world_id
        )

        self.db.add(region)
        self.db.commit()
        self.db.refresh(region)

        logger.info(f"Created region {region.id} ({region.name}) in world {world_id}")
        return region

    def get_region(self, region_id: int) -> Optional[Region]:
        """Get a region by ID"""
        return self.db.query(Region).filter(Region.id == region_id).first()

    def region_in_world(self, region_id: int, world_id: int) -> bool:
        """Check that a region exists and belongs to the given world"""
        return self.db.query(Region).filter(
            Region.id == region_id,
            Region.world_id == world_id
        ).first() is not None

    def get_regions(self, filters: Dict[str, Any] = None) -> List[Region]:
        """
        Get regions with optional filters

        Args:
            filters: 'world_id', 'type' (exact) and 'search' (name or description)
        """
        query = self.db.query(Region)

        if filters:
            if 'world_id' in filters:
                query = query.filter(Region.world_id == filters['world_id'])

            if filters.get('type'):
                query = query.filter(Region.type == filters['type'])

            if filters.get('search'):
                search_term = f"%{filters['search']}%"
                query = query.filter(
                    or_(
                        Region.name.ilike(search_term),
                        Region.description.ilike(search_term)
                    )
                )

        return query.order_by(Region.id).all()

    def update_region(self, region_id: int, update_data: Dict[str, Any]) -> Optional[Region]:
        """
        Update a region's properties

        Returns:
            Updated region or None if not found.
        """
        region = self.get_region(region_id)
        if not region:
            return None

        for key, value in update_data.items():
            if key in ("name", "world_id") and value is None:
                continue
            if hasattr(region, key):
                setattr(region, key, value)

        self.db.commit()
        self.db.refresh(region)
        return region

    def delete_region(self, region_id: int) -> bool:
        """
        Delete a region.

        Its locations go with it; characters and creatures that lived there
        keep existing with no region.
        """
        region = self.get_region(region_id)
        if not region:
            return False

        self.db.delete(region)
        self.db.commit()
        return True
