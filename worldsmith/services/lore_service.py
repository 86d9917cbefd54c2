# worldsmith/services/lore_service.py
import logging
from sqlalchemy.orm import Session
from sqlalchemy import or_
from typing import List, Optional, Dict, Any

from worldsmith.models.lore_entry import LoreEntry
from worldsmith.models.world import World

logger = logging.getLogger(__name__)


class LoreService:
    """Service for handling lore entry operations"""

    def __init__(self, db: Session):
        self.db = db

    def create_lore_entry(self,
                          world_id: int,
                          title: str,
                          content: Optional[str] = None,
                          category: Optional[str] = None,
                          image_url: Optional[str] = None) -> Optional[LoreEntry]:
        """
        Create a new lore entry

        Returns:
            The created entry or None if the world does not exist.
        """
        world = self.db.query(World).filter(World.id == world_id).first()
        if not world:
            return None

        entry = LoreEntry(
            world_id=world_id,
            title=title,
            content=content,
            category=category,
            image_url=image_url
        )

        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        return entry

    def get_lore_entry(self, lore_id: int) -> Optional[LoreEntry]:
        """Get a lore entry by ID"""
        return self.db.query(LoreEntry).filter(LoreEntry.id == lore_id).first()

    def get_lore_entries(self, filters: Dict[str, Any] = None) -> List[LoreEntry]:
        """
        Get lore entries with optional filters

        Args:
            filters: 'world_id', 'category' (exact) and 'search' (title or content)
        """
        query = self.db.query(LoreEntry)

        if filters:
            if 'world_id' in filters:
                query = query.filter(LoreEntry.world_id == filters['world_id'])

            if filters.get('category'):
                query = query.filter(LoreEntry.category == filters['category'])

            if filters.get('search'):
                search_term = f"%{filters['search']}%"
                query = query.filter(
                    or_(
                        LoreEntry.title.ilike(search_term),
                        LoreEntry.content.ilike(search_term)
                    )
                )

        return query.order_by(LoreEntry.id).all()

    def get_categories(self, world_id: int) -> List[str]:
        """Distinct categories used in a world, sorted"""
        rows = self.db.query(LoreEntry.category).filter(
            LoreEntry.world_id == world_id,
            LoreEntry.category.isnot(None)
        ).distinct().all()
        return sorted(row[0] for row in rows)

    def update_lore_entry(self, lore_id: int, update_data: Dict[str, Any]) -> Optional[LoreEntry]:
        """
        Update a lore entry

        Returns:
            Updated entry or None if not found.
        """
        entry = self.get_lore_entry(lore_id)
        if not entry:
            return None

        for key, value in update_data.items():
            if key in ("title", "world_id") and value is None:
                continue
            if hasattr(entry, key):
                setattr(entry, key, value)

        self.db.commit()
        self.db.refresh(entry)
        return entry

    def delete_lore_entry(self, lore_id: int) -> bool:
        """Delete a lore entry"""
        entry = self.get_lore_entry(lore_id)
        if not entry:
            return False

        self.db.delete(entry)
        self.db.commit()

        logger.info(f"Deleted lore entry {lore_id}")
        return True
