from backend.engine.gamegenerator.generator import Move, MoveGenerator

__all__ = ["Move", "MoveGenerator"]
