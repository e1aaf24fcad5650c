from typing import Optional

from fastapi import FastAPI

from parking_allocator import __version__
from parking_allocator.application.services.parking_manager import ParkingManager
from parking_allocator.infrastructure.api.routers.parking import router as parking_router
from parking_allocator.infrastructure.bootstrap import create_parking_manager
from parking_allocator.shared.utils import initialize_logger


def create_app(manager: Optional[ParkingManager] = None) -> FastAPI:
    initialize_logger()
    app = FastAPI(title="Parking Allocator", version=__version__)
    app.state.manager = manager or create_parking_manager()
    app.include_router(parking_router)
    return app
