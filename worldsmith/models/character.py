# worldsmith/models/character.py
from sqlalchemy import Column, Integer, String, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship

from worldsmith.database import Base
from worldsmith.models.enums import CharacterType
from worldsmith.models.mixins import TimestampMixin, value_enum


class Character(Base, TimestampMixin):
    __tablename__ = "characters"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    appearance = Column(Text, nullable=True)
    personality = Column(Text, nullable=True)
    abilities = Column(JSON, nullable=True)  # list of strings
    image_url = Column(String(500), nullable=True)
    race = Column(String(50), nullable=True)
    character_type = Column(value_enum(CharacterType), default=CharacterType.NPC, nullable=False)

    world_id = Column(Integer, ForeignKey("worlds.id", ondelete="CASCADE"), nullable=False, index=True)
    region_id = Column(Integer, ForeignKey("regions.id", ondelete="SET NULL"), nullable=True, index=True)
    location_id = Column(Integer, ForeignKey("locations.id", ondelete="SET NULL"), nullable=True)

    # Relationships
    world = relationship("World", back_populates="characters")
    region = relationship("Region", back_populates="characters")
    location = relationship("Location", back_populates="characters")
    created_spells = relationship("Spell", back_populates="creator")

    def __repr__(self):
        return f"<Character {self.id} - {self.name} ({self.character_type})>"
