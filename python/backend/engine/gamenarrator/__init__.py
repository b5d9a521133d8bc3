from backend.engine.gamenarrator.narrator import Narrator, Step

__all__ = ["Narrator", "Step"]
