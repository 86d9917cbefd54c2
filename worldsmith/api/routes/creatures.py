from fastapi import APIRouter, Depends, HTTPException, status

from worldsmith.schemas import CreatureCreate, CreatureResponse, CreatureUpdate
from worldsmith.api.dependencies import get_service, require_world
from worldsmith.services.creature_service import CreatureService
from worldsmith.services.world_service import WorldService

router = APIRouter()


@router.post("", response_model=CreatureResponse, status_code=status.HTTP_201_CREATED)
async def create_creature(
    creature: CreatureCreate,
    creature_service: CreatureService = Depends(get_service(CreatureService)),
    world_service: WorldService = Depends(get_service(WorldService))
):
    """Add a creature to a world's bestiary"""
    require_world(creature.world_id, world_service)
    created = creature_service.create_creature(creature.model_dump())
    if not created:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Region does not belong to this world"
        )
    return created


@router.get("/{creature_id}", response_model=CreatureResponse)
async def get_creature(
    creature_id: int,
    creature_service: CreatureService = Depends(get_service(CreatureService))
):
    """Get a creature by ID"""
    creature = creature_service.get_creature(creature_id)
    if not creature:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Creature not found"
        )
    return creature


@router.put("/{creature_id}", response_model=CreatureResponse)
async def update_creature(
    creature_id: int,
    creature_update: CreatureUpdate,
    creature_service: CreatureService = Depends(get_service(CreatureService))
):
    """Update a creature's stat block"""
    if not creature_service.get_creature(creature_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Creature not found"
        )
    creature = creature_service.update_creature(creature_id, creature_update.model_dump(exclude_unset=True))
    if not creature:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Region does not belong to this world"
        )
    return creature


@router.delete("/{creature_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_creature(
    creature_id: int,
    creature_service: CreatureService = Depends(get_service(CreatureService))
):
    """Remove a creature from the bestiary"""
    if not creature_service.delete_creature(creature_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Creature not found"
        )
    return None
