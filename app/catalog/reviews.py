"""Review statistics derived from a game's embedded reviews."""
from app.catalog.types import Game


def average_score(game: Game) -> float:
    """Arithmetic mean of review scores, 0.0 when the game has no reviews."""
    if not game.reviews:
        return 0.0
    return sum(review.score for review in game.reviews) / len(game.reviews)


def total_reviews(game: Game) -> int:
    return len(game.reviews)
