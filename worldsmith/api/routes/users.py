from fastapi import APIRouter, Depends, HTTPException, status

from worldsmith.schemas import UserCreate, UserResponse
from worldsmith.api.dependencies import get_service
from worldsmith.services.user_service import UserService

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    user: UserCreate,
    user_service: UserService = Depends(get_service(UserService))
):
    """
    Register a new user.

    The password is stored hashed and never returned.
    """
    created = user_service.create_user(username=user.username, password=user.password)
    if not created:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already taken"
        )
    return created


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    user_service: UserService = Depends(get_service(UserService))
):
    """Get a user by ID"""
    user = user_service.get_user(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user
