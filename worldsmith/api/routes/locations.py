from fastapi import APIRouter, Depends, HTTPException, status

from worldsmith.schemas import LocationCreate, LocationResponse, LocationUpdate
from worldsmith.api.dependencies import get_service
from worldsmith.services.location_service import LocationService

router = APIRouter()


@router.post("", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
async def create_location(
    location: LocationCreate,
    location_service: LocationService = Depends(get_service(LocationService))
):
    """
    Create a new location.

    The region must exist; x and y place it on the world map.
    """
    created = location_service.create_location(location.model_dump())
    if not created:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Region not found"
        )
    return created


@router.get("/{location_id}", response_model=LocationResponse)
async def get_location(
    location_id: int,
    location_service: LocationService = Depends(get_service(LocationService))
):
    """Get a specific location by ID"""
    location = location_service.get_location(location_id)
    if not location:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Location not found"
        )
    return location


@router.put("/{location_id}", response_model=LocationResponse)
async def update_location(
    location_id: int,
    location_update: LocationUpdate,
    location_service: LocationService = Depends(get_service(LocationService))
):
    """
    Update a location.

    Moving it to another region is allowed only within the same world.
    """
    if not location_service.get_location(location_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Location not found"
        )
    location = location_service.update_location(location_id, location_update.model_dump(exclude_unset=True))
    if not location:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Region does not belong to this world"
        )
    return location


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_location(
    location_id: int,
    location_service: LocationService = Depends(get_service(LocationService))
):
    """Delete a location"""
    if not location_service.delete_location(location_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Location not found"
        )
    return None
