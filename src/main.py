"""Main application: chainkit API + chain endpoints."""

from src.chainkit.api.app import create_app
from src.clients import chains_router

app = create_app()

app.include_router(chains_router)
