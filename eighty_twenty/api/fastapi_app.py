from fastapi import FastAPI

from eighty_twenty.api.auth.routes import router as auth_router
from eighty_twenty.api.health import router as health_router
from eighty_twenty.api.songs.routes import router as songs_router
from eighty_twenty.core import configure_logging

configure_logging()

app = FastAPI(
    title="Eighty-Twenty Playlist API",
    version="0.1.0",
    description="Song-list extraction and Spotify authorization helpers.",
)

app.include_router(health_router, tags=["health"])
app.include_router(songs_router, prefix="/songs", tags=["songs"])
app.include_router(auth_router, prefix="/auth", tags=["auth"])
