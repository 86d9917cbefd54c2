# worldsmith/services/spell_service.py
from sqlalchemy.orm import Session
from sqlalchemy import or_
from typing import List, Optional, Dict, Any

from worldsmith.models.spell import Spell
from worldsmith.services.character_service import CharacterService


class SpellService:
    """Service for handling spellbook operations"""

    def __init__(self, db: Session):
        self.db = db
        self.character_service = CharacterService(db)

    def create_spell(self, spell_data: Dict[str, Any]) -> Optional[Spell]:
        """
        Create a new spell.

        Returns:
            The created spell or None if the creator is not a character of the world.
        """
        creator_id = spell_data.get("creator_character_id")
        if creator_id is not None and \
                not self.character_service.character_in_world(creator_id, spell_data["world_id"]):
            return None

        spell = Spell(**spell_data)

        self.db.add(spell)
        self.db.commit()
        self.db.refresh(spell)
        return spell

    def get_spell(self, spell_id: int) -> Optional[Spell]:
        """Get a spell by ID"""
        return self.db.query(Spell).filter(Spell.id == spell_id).first()

    def get_spells(self, filters: Dict[str, Any] = None) -> List[Spell]:
        """
        Get spells with optional filters.

        Args:
            filters: 'world_id', 'school', 'level', 'creator_character_id'
                and 'search' (name or description)
        """
        query = self.db.query(Spell)

        if filters:
            if 'world_id' in filters:
                query = query.filter(Spell.world_id == filters['world_id'])

            if filters.get('school'):
                query = query.filter(Spell.school == filters['school'])

            if filters.get('level') is not None:
                query = query.filter(Spell.level == filters['level'])

            if 'creator_character_id' in filters:
                query = query.filter(Spell.creator_character_id == filters['creator_character_id'])

            if filters.get('search'):
                search_term = f"%{filters['search']}%"
                query = query.filter(
                    or_(
                        Spell.name.ilike(search_term),
                        Spell.description.ilike(search_term)
                    )
                )

        return query.order_by(Spell.id).all()

    def update_spell(self, spell_id: int, update_data: Dict[str, Any]) -> Optional[Spell]:
        """
        Update a spell.

        Returns:
            Updated spell or None if not found or the new creator is invalid.
        """
        spell = self.get_spell(spell_id)
        if not spell:
            return None

        creator_id = update_data.get('creator_character_id')
        if creator_id is not None and not self.character_service.character_in_world(creator_id, spell.world_id):
            return None

        for key, value in update_data.items():
            if key in ("name", "world_id") and value is None:
                continue
            if hasattr(spell, key):
                setattr(spell, key, value)

        self.db.commit()
        self.db.refresh(spell)
        return spell

    def delete_spell(self, spell_id: int) -> bool:
        """Delete a spell"""
        spell = self.get_spell(spell_id)
        if not spell:
            return False

        self.db.delete(spell)
        self.db.commit()
        return True
