from backend.engine.gameplay.game import Game

__all__ = ["Game"]
