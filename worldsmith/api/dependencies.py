# worldsmith/api/dependencies.py
from typing import Type, Callable
from fastapi import Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from worldsmith.database import get_db
from worldsmith.models.world import World
from worldsmith.services.world_service import WorldService


def get_service(service_class: Type) -> Callable:
    """Factory function to create service dependencies with DB injection"""
    def _get_service(db: Session = Depends(get_db)):
        return service_class(db)
    return _get_service


def get_world_or_404(
    world_id: int = Path(..., title="The ID of the world"),
    world_service: WorldService = Depends(get_service(WorldService))
) -> World:
    """
    Resolve the world named in the path, or answer 404.
    """
    world = world_service.get_world(world_id)
    if not world:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="World not found"
        )
    return world


def require_world(world_id: int, world_service: WorldService) -> World:
    """Same check as get_world_or_404 for a world_id that arrives in a request body"""
    world = world_service.get_world(world_id)
    if not world:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="World not found"
        )
    return world
