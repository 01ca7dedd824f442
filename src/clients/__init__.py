"""Domain clients: chain REST endpoints and CLI."""

from .chains.router import router as chains_router

__all__ = [
    "chains_router",
]
