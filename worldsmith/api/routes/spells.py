from fastapi import APIRouter, Depends, HTTPException, status

from worldsmith.schemas import SpellCreate, SpellResponse, SpellUpdate
from worldsmith.api.dependencies import get_service, require_world
from worldsmith.services.spell_service import SpellService
from worldsmith.services.world_service import WorldService

router = APIRouter()


@router.post("", response_model=SpellResponse, status_code=status.HTTP_201_CREATED)
async def create_spell(
    spell: SpellCreate,
    spell_service: SpellService = Depends(get_service(SpellService)),
    world_service: WorldService = Depends(get_service(WorldService))
):
    """
    Add a spell to a world's spellbook

    The creator, when given, must be a character of the same world.
    """
    require_world(spell.world_id, world_service)
    created = spell_service.create_spell(spell.model_dump())
    if not created:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Creator character does not belong to this world"
        )
    return created


@router.get("/{spell_id}", response_model=SpellResponse)
async def get_spell(
    spell_id: int,
    spell_service: SpellService = Depends(get_service(SpellService))
):
    """Get a spell by ID"""
    spell = spell_service.get_spell(spell_id)
    if not spell:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Spell not found"
        )
    return spell


@router.put("/{spell_id}", response_model=SpellResponse)
async def update_spell(
    spell_id: int,
    spell_update: SpellUpdate,
    spell_service: SpellService = Depends(get_service(SpellService))
):
    """Update a spell"""
    if not spell_service.get_spell(spell_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Spell not found"
        )
    spell = spell_service.update_spell(spell_id, spell_update.model_dump(exclude_unset=True))
    if not spell:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Creator character does not belong to this world"
        )
    return spell


@router.delete("/{spell_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_spell(
    spell_id: int,
    spell_service: SpellService = Depends(get_service(SpellService))
):
    """Remove a spell from the spellbook"""
    if not spell_service.delete_spell(spell_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Spell not found"
        )
    return None
