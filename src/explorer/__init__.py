"""Procedural walking-explorer scene rendered with pygame."""

from .core.engine import EngineState, ExplorerEngine, create_explorer_engine

__version__ = "0.1.0"

__all__ = ["EngineState", "ExplorerEngine", "create_explorer_engine", "__version__"]
