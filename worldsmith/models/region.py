# worldsmith/models/region.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from worldsmith.database import Base
from worldsmith.models.mixins import TimestampMixin


class Region(Base, TimestampMixin):
    __tablename__ = "regions"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    type = Column(String(50), nullable=True)

    world_id = Column(Integer, ForeignKey("worlds.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    world = relationship("World", back_populates="regions")
    locations = relationship("Location", back_populates="region", cascade="all, delete-orphan")
    # Characters and creatures outlive their region; their region_id is nulled
    characters = relationship("Character", back_populates="region")
    creatures = relationship("Creature", back_populates="region")

    def __repr__(self):
        return f"<Region {self.id} - {self.name} (World: {self.world_id})>"
