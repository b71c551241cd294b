from backend.engine.gamegenerator.generator import RandomSource, SeededRandom, TileSpawner

__all__ = ["RandomSource", "SeededRandom", "TileSpawner"]
