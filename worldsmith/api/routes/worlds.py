from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional

from worldsmith.schemas import (
    WorldCreate, WorldResponse, WorldUpdate, RegionResponse, LocationResponse,
    CharacterResponse, CreatureResponse, SpellResponse, LoreEntryResponse
)
from worldsmith.api.dependencies import get_service, get_world_or_404
from worldsmith.services.world_service import WorldService
from worldsmith.services.region_service import RegionService
from worldsmith.services.location_service import LocationService
from worldsmith.services.character_service import CharacterService
from worldsmith.services.creature_service import CreatureService
from worldsmith.services.spell_service import SpellService
from worldsmith.services.lore_service import LoreService
from worldsmith.models.enums import CharacterType, MarkerType
from worldsmith.models.world import World

router = APIRouter()


@router.post("", response_model=WorldResponse, status_code=status.HTTP_201_CREATED)
async def create_world(
    world: WorldCreate,
    world_service: WorldService = Depends(get_service(WorldService))
):
    """
    Create a new world

    Returns the created world.
    """
    created = world_service.create_world(
        user_id=world.user_id,
        name=world.name,
        description=world.description,
        image_url=world.image_url
    )
    if not created:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Owner user does not exist"
        )
    return created


@router.get("", response_model=List[WorldResponse])
async def list_worlds(
    user_id: Optional[int] = None,
    search: Optional[str] = None,
    world_service: WorldService = Depends(get_service(WorldService))
):
    """
    Get all worlds, oldest first.

    Pages default to the first world in this list.
    """
    filters = {}
    if user_id is not None:
        filters['user_id'] = user_id
    if search:
        filters['search'] = search
    return world_service.get_worlds(filters=filters)


@router.get("/{world_id}", response_model=WorldResponse)
async def get_world(world: World = Depends(get_world_or_404)):
    """Get a specific world by ID."""
    return world


@router.put("/{world_id}", response_model=WorldResponse)
async def update_world(
    world_update: WorldUpdate,
    world: World = Depends(get_world_or_404),
    world_service: WorldService = Depends(get_service(WorldService))
):
    """Update a world's name, description or image."""
    update_data = world_update.model_dump(exclude_unset=True)
    return world_service.update_world(world.id, update_data)


@router.delete("/{world_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_world(
    world: World = Depends(get_world_or_404),
    world_service: WorldService = Depends(get_service(WorldService))
):
    """
    Delete a world.

    Regions, locations, characters, creatures, spells and lore go with it.
    """
    world_service.delete_world(world.id)
    return None


# World-scoped collections. Each list is ordered by id and may be narrowed
# with a search term and one category filter.

@router.get("/{world_id}/regions", response_model=List[RegionResponse])
async def list_world_regions(
    type: Optional[str] = None,
    search: Optional[str] = None,
    world: World = Depends(get_world_or_404),
    region_service: RegionService = Depends(get_service(RegionService))
):
    """Get the regions of a world"""
    return region_service.get_regions(filters={'world_id': world.id, 'type': type, 'search': search})


@router.get("/{world_id}/locations", response_model=List[LocationResponse])
async def list_world_locations(
    marker_type: Optional[MarkerType] = None,
    search: Optional[str] = None,
    world: World = Depends(get_world_or_404),
    location_service: LocationService = Depends(get_service(LocationService))
):
    """Get every location in any region of a world"""
    return location_service.get_locations(
        filters={'world_id': world.id, 'marker_type': marker_type, 'search': search}
    )


@router.get("/{world_id}/characters", response_model=List[CharacterResponse])
async def list_world_characters(
    character_type: Optional[CharacterType] = None,
    search: Optional[str] = None,
    world: World = Depends(get_world_or_404),
    character_service: CharacterService = Depends(get_service(CharacterService))
):
    """Get the characters of a world"""
    return character_service.get_characters(
        filters={'world_id': world.id, 'character_type': character_type, 'search': search}
    )


@router.get("/{world_id}/creatures", response_model=List[CreatureResponse])
async def list_world_creatures(
    rarity: Optional[str] = None,
    search: Optional[str] = None,
    world: World = Depends(get_world_or_404),
    creature_service: CreatureService = Depends(get_service(CreatureService))
):
    """Get the bestiary of a world"""
    return creature_service.get_creatures(
        filters={'world_id': world.id, 'rarity': rarity, 'search': search}
    )


@router.get("/{world_id}/spells", response_model=List[SpellResponse])
async def list_world_spells(
    school: Optional[str] = None,
    level: Optional[int] = Query(None, ge=0, le=9),
    search: Optional[str] = None,
    world: World = Depends(get_world_or_404),
    spell_service: SpellService = Depends(get_service(SpellService))
):
    """Get the spellbook of a world"""
    return spell_service.get_spells(
        filters={'world_id': world.id, 'school': school, 'level': level, 'search': search}
    )


@router.get("/{world_id}/lore", response_model=List[LoreEntryResponse])
async def list_world_lore(
    category: Optional[str] = None,
    search: Optional[str] = None,
    world: World = Depends(get_world_or_404),
    lore_service: LoreService = Depends(get_service(LoreService))
):
    """Get the lore entries of a world"""
    return lore_service.get_lore_entries(
        filters={'world_id': world.id, 'category': category, 'search': search}
    )


@router.get("/{world_id}/lore/categories", response_model=List[str])
async def list_world_lore_categories(
    world: World = Depends(get_world_or_404),
    lore_service: LoreService = Depends(get_service(LoreService))
):
    """Get the distinct lore categories used in a world"""
    return lore_service.get_categories(world.id)
