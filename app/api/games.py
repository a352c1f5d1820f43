"""Game catalog API endpoints."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import verify_api_key
from app.catalog import CatalogService, Game, GameInput, SearchCriteria
from app.config import get_settings
from app.database import get_session
from app.stores import GameStore, InMemoryGameStore, SqlGameStore

router = APIRouter(prefix="/gameshop", tags=["gameshop"])

# Shared by every request when STORE_BACKEND=memory
memory_store = InMemoryGameStore()


class AverageScoreResponse(BaseModel):
    """Response for a game's average review score."""
    game_id: str
    average_score: float


class TotalReviewsResponse(BaseModel):
    """Response for a game's review count."""
    game_id: str
    total_reviews: int


async def get_game_store(db: AsyncSession = Depends(get_session)) -> GameStore:
    """Dependency for the configured game store."""
    if get_settings().use_memory_store:
        return memory_store
    return SqlGameStore(db)


async def get_catalog(store: GameStore = Depends(get_game_store)) -> CatalogService:
    """Dependency for a catalog service bound to the request's store."""
    return CatalogService(store)


@router.get("", response_model=list[Game])
async def list_games(
    catalog: CatalogService = Depends(get_catalog),
    _: str = Depends(verify_api_key),
):
    """Get all games."""
    return await catalog.list_games()


@router.get("/search", response_model=list[Game])
async def search_games(
    title: Optional[str] = None,
    developer: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    genre: Optional[str] = None,
    catalog: CatalogService = Depends(get_catalog),
    _: str = Depends(verify_api_key),
):
    """Search games; every parameter is optional and they combine with AND."""
    criteria = SearchCriteria(
        title=title,
        developer=developer,
        min_price=min_price,
        max_price=max_price,
        genre=genre,
    )
    return await catalog.search_games(criteria)


@router.get("/title", response_model=list[Game])
async def games_by_title(
    title: str = Query(...),
    catalog: CatalogService = Depends(get_catalog),
    _: str = Depends(verify_api_key),
):
    """Get games whose title contains the given text, ignoring case."""
    return await catalog.games_by_title(title)


@router.get("/price-range", response_model=list[Game])
async def games_by_price_range(
    low: float = Query(...),
    high: float = Query(...),
    catalog: CatalogService = Depends(get_catalog),
    _: str = Depends(verify_api_key),
):
    """Get games priced between low and high, both inclusive."""
    return await catalog.games_by_price_range(low, high)


@router.get("/{game_id}", response_model=Game)
async def get_game(
    game_id: str,
    catalog: CatalogService = Depends(get_catalog),
    _: str = Depends(verify_api_key),
):
    """Get a single game."""
    game = await catalog.get_game(game_id)

    if not game:
        raise HTTPException(status_code=404, detail="Game not found")

    return game


@router.post("", response_model=Game, status_code=status.HTTP_201_CREATED)
async def create_game(
    game: GameInput,
    catalog: CatalogService = Depends(get_catalog),
    _: str = Depends(verify_api_key),
):
    """Add a game to the catalog."""
    return await catalog.add_game(game)


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_game(
    game_id: str,
    catalog: CatalogService = Depends(get_catalog),
    _: str = Depends(verify_api_key),
):
    """Delete a game. Unknown ids are accepted."""
    await catalog.delete_game(game_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{game_id}/average-score", response_model=AverageScoreResponse)
async def get_average_score(
    game_id: str,
    catalog: CatalogService = Depends(get_catalog),
    _: str = Depends(verify_api_key),
):
    """Get the average review score of a game (0.0 without reviews)."""
    return AverageScoreResponse(
        game_id=game_id,
        average_score=await catalog.average_score(game_id),
    )


@router.get("/{game_id}/total-reviews", response_model=TotalReviewsResponse)
async def get_total_reviews(
    game_id: str,
    catalog: CatalogService = Depends(get_catalog),
    _: str = Depends(verify_api_key),
):
    """Get the number of reviews of a game."""
    return TotalReviewsResponse(
        game_id=game_id,
        total_reviews=await catalog.total_reviews(game_id),
    )
