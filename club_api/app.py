"""
Player Club Signing API application.

Builds the FastAPI app around a single in-memory ``ClubStore``, seeded
with random players and teams unless told otherwise. Run with::

    uvicorn club_api.app:app
"""

import logging
import random
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from club_api.config import Settings, get_settings
from club_api.logging_config import setup_logging
from club_api.middleware import RequestLogMiddleware
from club_api.routes import players_router, teams_router
from club_api.seed import seed_store
from club_api.store import ClubStore, EntityNotFound, InvalidReference

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[ClubStore] = None) -> FastAPI:
    """
    Create and configure the application.

    Args:
        settings: Configuration, read from the environment when omitted
        store: Store to serve; a new one is created (and seeded when
            ``settings.seed_on_startup`` is set) when omitted

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    if store is None:
        store = ClubStore()
        if settings.seed_on_startup:
            rng = random.Random(settings.seed_random) if settings.seed_random is not None else None
            seed_store(
                store,
                n_players=settings.seed_players,
                n_teams=settings.seed_teams,
                team_size=settings.seed_team_size,
                rng=rng
            )

    app = FastAPI(title=settings.app_title)
    app.state.store = store
    app.state.settings = settings

    app.add_middleware(RequestLogMiddleware)

    # CORS middleware (must be last to apply first)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(EntityNotFound)
    async def not_found_handler(request: Request, exc: EntityNotFound):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(InvalidReference)
    async def invalid_reference_handler(request: Request, exc: InvalidReference):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    app.include_router(players_router)
    app.include_router(teams_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return settings.app_title

    @app.get("/health")
    async def health():
        return {"status": "healthy", **store.counts()}

    counts = store.counts()
    logger.info("Serving %d players and %d teams", counts["players"], counts["teams"])
    return app


app = create_app()


def main():
    import uvicorn

    settings = app.state.settings
    uvicorn.run(app, host=settings.app_host, port=settings.app_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
