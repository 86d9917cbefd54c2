# worldsmith/models/spell.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from worldsmith.database import Base
from worldsmith.models.mixins import TimestampMixin


class Spell(Base, TimestampMixin):
    __tablename__ = "spells"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    level = Column(Integer, nullable=True)
    school = Column(String(50), nullable=True)
    casting_time = Column(String(50), nullable=True)
    range = Column(String(50), nullable=True)
    components = Column(String(200), nullable=True)
    duration = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)

    world_id = Column(Integer, ForeignKey("worlds.id", ondelete="CASCADE"), nullable=False, index=True)
    creator_character_id = Column(Integer, ForeignKey("characters.id", ondelete="SET NULL"), nullable=True)

    # Relationships
    world = relationship("World", back_populates="spells")
    creator = relationship("Character", back_populates="created_spells")

    def __repr__(self):
        return f"<Spell {self.id} - {self.name} (Level {self.level})>"
