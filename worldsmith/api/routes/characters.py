from fastapi import APIRouter, Depends, HTTPException, status

from worldsmith.schemas import CharacterCreate, CharacterResponse, CharacterUpdate
from worldsmith.api.dependencies import get_service, require_world
from worldsmith.services.character_service import CharacterService
from worldsmith.services.world_service import WorldService

router = APIRouter()


@router.post("", response_model=CharacterResponse, status_code=status.HTTP_201_CREATED)
async def create_character(
    character: CharacterCreate,
    character_service: CharacterService = Depends(get_service(CharacterService)),
    world_service: WorldService = Depends(get_service(WorldService))
):
    """
    Create a new character

    Region and location are optional but must belong to the same world.
    """
    require_world(character.world_id, world_service)
    created = character_service.create_character(character.model_dump())
    if not created:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Region or location does not belong to this world"
        )
    return created


@router.get("/{character_id}", response_model=CharacterResponse)
async def get_character(
    character_id: int,
    character_service: CharacterService = Depends(get_service(CharacterService))
):
    """Get a character by ID"""
    character = character_service.get_character(character_id)
    if not character:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Character not found"
        )
    return character


@router.put("/{character_id}", response_model=CharacterResponse)
async def update_character(
    character_id: int,
    character_update: CharacterUpdate,
    character_service: CharacterService = Depends(get_service(CharacterService))
):
    """Update a character"""
    if not character_service.get_character(character_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Character not found"
        )
    character = character_service.update_character(character_id, character_update.model_dump(exclude_unset=True))
    if not character:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Region or location does not belong to this world"
        )
    return character


@router.delete("/{character_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_character(
    character_id: int,
    character_service: CharacterService = Depends(get_service(CharacterService))
):
    """Delete a character"""
    if not character_service.delete_character(character_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Character not found"
        )
    return None
