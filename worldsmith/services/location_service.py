# worldsmith/services/location_service.py
import logging
from sqlalchemy.orm import Session
from sqlalchemy import or_
from typing import List, Optional, Dict, Any

from worldsmith.models.location import Location
from worldsmith.models.region import Region
from worldsmith.services.region_service import RegionService

logger = logging.getLogger(__name__)


class LocationService:
    """Service for handling location operations"""

    def __init__(self, db: Session):
        self.db = db

    def create_location(self, location_data: Dict[str, Any]) -> Optional[Location]:
        """
        Create a new location

        Args:
            location_data: Column values; 'region_id' is required

        Returns:
            The created location or None if the region does not exist.
        """
        region = self.db.query(Region).filter(Region.id == location_data.get("region_id")).first()
        if not region:
            return None

        location = Location(**location_data)

        self.db.add(location)
        self.db.commit()
        self.db.refresh(location)

        logger.info(f"Created location {location.id} ({location.name}) in region {region.id}")
        return location

    def get_location(self, location_id: int) -> Optional[Location]:
        """Get a location by ID"""
        return self.db.query(Location).filter(Location.id == location_id).first()

    def location_in_world(self, location_id: int, world_id: int) -> bool:
        """Check that a location exists and sits in a region of the given world"""
        return self.db.query(Location).join(Region).filter(
            Location.id == location_id,
            Region.world_id == world_id
        ).first() is not None

    def get_locations(self, filters: Dict[str, Any] = None) -> List[Location]:
        """
        Get locations with optional filters

        Args:
            filters: 'world_id' (through the region), 'region_id', 'marker_type',
                'location_type' and 'search' (name or description)
        """
        query = self.db.query(Location)

        if filters:
            if 'world_id' in filters:
                query = query.join(Region).filter(Region.world_id == filters['world_id'])

            if 'region_id' in filters:
                query = query.filter(Location.region_id == filters['region_id'])

            if filters.get('marker_type'):
                query = query.filter(Location.marker_type == filters['marker_type'])

            if filters.get('location_type'):
                query = query.filter(Location.location_type == filters['location_type'])

            if filters.get('search'):
                search_term = f"%{filters['search']}%"
                query = query.filter(
                    or_(
                        Location.name.ilike(search_term),
                        Location.description.ilike(search_term)
                    )
                )

        return query.order_by(Location.id).all()

    def update_location(self, location_id: int, update_data: Dict[str, Any]) -> Optional[Location]:
        """
        Update a location's properties

        A new region_id must name a region in the same world.

        Returns:
            Updated location or None if not found or the move is invalid.
        """
        location = self.get_location(location_id)
        if not location:
            return None

        new_region_id = update_data.get('region_id')
        moved = new_region_id is not None and new_region_id != location.region_id
        if moved and not RegionService(self.db).region_in_world(new_region_id, location.region.world_id):
            return None

        for key, value in update_data.items():
            if key in ("name", "region_id", "marker_type") and value is None:
                continue
            if hasattr(location, key):
                setattr(location, key, value)

        if moved:
            # Characters placed here follow the location into its new region
            for character in location.characters:
                if character.region_id is not None:
                    character.region_id = new_region_id
            logger.info(f"Moved location {location_id} to region {new_region_id}")

        self.db.commit()
        self.db.refresh(location)
        return location

    def delete_location(self, location_id: int) -> bool:
        """Delete a location; characters placed there lose their location"""
        location = self.get_location(location_id)
        if not location:
            return False

        self.db.delete(location)
        self.db.commit()
        return True
