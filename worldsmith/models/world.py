# worldsmith/models/world.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from worldsmith.database import Base
from worldsmith.models.mixins import TimestampMixin


class World(Base, TimestampMixin):
    __tablename__ = "worlds"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    owner = relationship("User", back_populates="worlds")
    regions = relationship("Region", back_populates="world", cascade="all, delete-orphan")
    characters = relationship("Character", back_populates="world", cascade="all, delete-orphan")
    creatures = relationship("Creature", back_populates="world", cascade="all, delete-orphan")
    spells = relationship("Spell", back_populates="world", cascade="all, delete-orphan")
    lore_entries = relationship("LoreEntry", back_populates="world", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<World {self.id} - {self.name}>"
