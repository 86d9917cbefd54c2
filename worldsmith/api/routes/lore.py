from fastapi import APIRouter, Depends, HTTPException, status

from worldsmith.schemas import LoreEntryCreate, LoreEntryResponse, LoreEntryUpdate
from worldsmith.api.dependencies import get_service
from worldsmith.services.lore_service import LoreService

router = APIRouter()


@router.post("", response_model=LoreEntryResponse, status_code=status.HTTP_201_CREATED)
async def create_lore_entry(
    entry: LoreEntryCreate,
    lore_service: LoreService = Depends(get_service(LoreService))
):
    """Create a new lore entry"""
    created = lore_service.create_lore_entry(
        world_id=entry.world_id,
        title=entry.title,
        content=entry.content,
        category=entry.category,
        image_url=entry.image_url
    )
    if not created:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="World not found"
        )
    return created


@router.get("/{lore_id}", response_model=LoreEntryResponse)
async def get_lore_entry(
    lore_id: int,
    lore_service: LoreService = Depends(get_service(LoreService))
):
    """Get a lore entry by ID"""
    entry = lore_service.get_lore_entry(lore_id)
    if not entry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Lore entry not found"
        )
    return entry


@router.put("/{lore_id}", response_model=LoreEntryResponse)
async def update_lore_entry(
    lore_id: int,
    entry_update: LoreEntryUpdate,
    lore_service: LoreService = Depends(get_service(LoreService))
):
    """Update a lore entry"""
    entry = lore_service.update_lore_entry(lore_id, entry_update.model_dump(exclude_unset=True))
    if not entry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Lore entry not found"
        )
    return entry


@router.delete("/{lore_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_lore_entry(
    lore_id: int,
    lore_service: LoreService = Depends(get_service(LoreService))
):
    """Delete a lore entry"""
    if not lore_service.delete_lore_entry(lore_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Lore entry not found"
        )
    return None
