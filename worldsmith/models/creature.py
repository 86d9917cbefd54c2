# worldsmith/models/creature.py
from sqlalchemy import Column, Integer, String, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship

from worldsmith.database import Base
from worldsmith.models.mixins import TimestampMixin


class Creature(Base, TimestampMixin):
    __tablename__ = "creatures"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    creature_type = Column(String(50), nullable=True)
    rarity = Column(String(30), default="common", nullable=True)
    challenge_rating = Column(String(10), nullable=True)
    armor_class = Column(Integer, nullable=True)
    hit_points = Column(String(50), nullable=True)
    speed = Column(String(100), nullable=True)
    abilities = Column(JSON, default=dict, nullable=True)  # e.g. {"STR": 18, "DEX": 12}
    special_attacks = Column(JSON, nullable=True)  # list of strings
    element_type = Column(String(30), nullable=True)

    world_id = Column(Integer, ForeignKey("worlds.id", ondelete="CASCADE"), nullable=False, index=True)
    region_id = Column(Integer, ForeignKey("regions.id", ondelete="SET NULL"), nullable=True, index=True)

    # Relationships
    world = relationship("World", back_populates="creatures")
    region = relationship("Region", back_populates="creatures")

    def __repr__(self):
        return f"<Creature {self.id} - {self.name} (CR {self.challenge_rating})>"
