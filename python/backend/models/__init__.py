from backend.models.bestscore import BEST_KEY, BestScoreManager
from backend.models.board import Board, Direction, slide_and_merge
from backend.models.config import GameConfig
from backend.models.status import GameStatus

__all__ = [
    "BEST_KEY",
    "BestScoreManager",
    "Board",
    "Direction",
    "GameConfig",
    "GameStatus",
    "slide_and_merge",
]
