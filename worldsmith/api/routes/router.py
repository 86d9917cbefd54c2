# worldsmith/api/routes/router.py
from fastapi import APIRouter
from worldsmith.api.routes import users, worlds, regions, locations, characters, creatures, spells, lore

# Create the main router
api_router = APIRouter()

# Include all the sub-routers
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(worlds.router, prefix="/worlds", tags=["worlds"])
api_router.include_router(regions.router, prefix="/regions", tags=["regions"])
api_router.include_router(locations.router, prefix="/locations", tags=["locations"])
api_router.include_router(characters.router, prefix="/characters", tags=["characters"])
api_router.include_router(creatures.router, prefix="/creatures", tags=["creatures"])
api_router.include_router(spells.router, prefix="/spells", tags=["spells"])
api_router.include_router(lore.router, prefix="/lore", tags=["lore"])
