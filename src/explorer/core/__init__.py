from .app import App, AppSettings
from .engine import EngineState, ExplorerEngine, create_explorer_engine

__all__ = [
    "App",
    "AppSettings",
    "EngineState",
    "ExplorerEngine",
    "create_explorer_engine",
]
