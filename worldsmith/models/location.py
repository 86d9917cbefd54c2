# worldsmith/models/location.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from worldsmith.database import Base
from worldsmith.models.enums import MarkerType
from worldsmith.models.mixins import TimestampMixin, value_enum


class Location(Base, TimestampMixin):
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    location_type = Column(String(50), nullable=True)
    x = Column(Integer, nullable=True)
    y = Column(Integer, nullable=True)
    marker_type = Column(value_enum(MarkerType), default=MarkerType.STANDARD, nullable=False)

    region_id = Column(Integer, ForeignKey("regions.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    region = relationship("Region", back_populates="locations")
    characters = relationship("Character", back_populates="location")

    def __repr__(self):
        return f"<Location {self.id} - {self.name} ({self.x}, {self.y})>"
