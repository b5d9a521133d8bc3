from backend.engine.gamesolver.node import Node
from backend.engine.gamesolver.solver import DEFAULT_NODE_LIMIT, Solver

__all__ = ["DEFAULT_NODE_LIMIT", "Node", "Solver"]
