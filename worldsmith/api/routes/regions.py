from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from worldsmith.schemas import RegionCreate, RegionResponse, RegionUpdate, LocationResponse
from worldsmith.api.dependencies import get_service, require_world
from worldsmith.services.region_service import RegionService
from worldsmith.services.location_service import LocationService
from worldsmith.services.world_service import WorldService

router = APIRouter()


@router.post("", response_model=RegionResponse, status_code=status.HTTP_201_CREATED)
async def create_region(
    region: RegionCreate,
    region_service: RegionService = Depends(get_service(RegionService)),
    world_service: WorldService = Depends(get_service(WorldService))
):
    """Create a new region in a world"""
    require_world(region.world_id, world_service)
    return region_service.create_region(
        world_id=region.world_id,
        name=region.name,
        description=region.description,
        image_url=region.image_url,
        type=region.type
    )


@router.get("/{region_id}", response_model=RegionResponse)
async def get_region(
    region_id: int,
    region_service: RegionService = Depends(get_service(RegionService))
):
    """Get a specific region by ID"""
    region = region_service.get_region(region_id)
    if not region:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Region not found"
        )
    return region


@router.get("/{region_id}/locations", response_model=List[LocationResponse])
async def list_region_locations(
    region_id: int,
    region_service: RegionService = Depends(get_service(RegionService)),
    location_service: LocationService = Depends(get_service(LocationService))
):
    """Get the locations inside a region"""
    if not region_service.get_region(region_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Region not found"
        )
    return location_service.get_locations(filters={'region_id': region_id})


@router.put("/{region_id}", response_model=RegionResponse)
async def update_region(
    region_id: int,
    region_update: RegionUpdate,
    region_service: RegionService = Depends(get_service(RegionService))
):
    """Update a region"""
    region = region_service.update_region(region_id, region_update.model_dump(exclude_unset=True))
    if not region:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Region not found"
        )
    return region


@router.delete("/{region_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_region(
    region_id: int,
    region_service: RegionService = Depends(get_service(RegionService))
):
    """
    Delete a region.

    Its locations are deleted; characters and creatures keep existing with no region.
    """
    if not region_service.delete_region(region_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Region not found"
        )
    return None
