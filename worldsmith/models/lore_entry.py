# worldsmith/models/lore_entry.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from worldsmith.database import Base
from worldsmith.models.mixins import TimestampMixin


class LoreEntry(Base, TimestampMixin):
    __tablename__ = "lore_entries"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=True)
    category = Column(String(100), nullable=True)
    image_url = Column(String(500), nullable=True)

    world_id = Column(Integer, ForeignKey("worlds.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    world = relationship("World", back_populates="lore_entries")

    def __repr__(self):
        return f"<LoreEntry {self.id} - {self.title} ({self.category})>"
