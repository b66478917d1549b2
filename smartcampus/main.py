from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smartcampus.api.routes.rooms import rooms_router
from smartcampus.application.room_service import RoomService
from smartcampus.config import Config
from smartcampus.infrastructure.memory_room_store import InMemoryRoomStore
from smartcampus.logs import configure_logging

logger = structlog.get_logger(__name__)


def app_factory(config: Config | None = None) -> FastAPI:
    config = config or Config()
    configure_logging(config.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.seed_rooms:
            store = InMemoryRoomStore.seeded()
        else:
            store = InMemoryRoomStore()
        app.state.room_service = RoomService(store)
        logger.info("registry_initialized", rooms=store.count())
        yield

    app = FastAPI(title="Smart Campus Rooms", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors.allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(rooms_router)

    return app


app = app_factory(Config.load())
