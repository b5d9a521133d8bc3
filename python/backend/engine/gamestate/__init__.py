from backend.engine.gamestate.state import BLOCK_COUNT, EMPTY_COUNT, GameState

__all__ = ["BLOCK_COUNT", "EMPTY_COUNT", "GameState"]
