import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campus_bus.config import Settings, settings as default_settings
from campus_bus.exceptions import register_exception_handlers
from campus_bus.storage import Storage, create_storage
from campus_bus.bookings.booking_service import BookingService
from campus_bus.system.service import SystemStatusService
from campus_bus.seed import seed_sample_routes
from campus_bus.admin.router import router as admin_router
from campus_bus.bookings.router import router as bookings_router
from campus_bus.buses.router import router as buses_router
from campus_bus.students.router import router as students_router
from campus_bus.system.router import router as system_router

logger = logging.getLogger(__name__)

def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )

def create_app(settings: Optional[Settings] = None, store: Optional[Storage] = None) -> FastAPI:
    """Build the API. The store is created at startup unless one is passed in."""
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app_store = store or create_storage(settings)
        SystemStatusService(app_store).initialize()
        if settings.SEED_SAMPLE_DATA:
            seed_sample_routes(app_store, window_days=settings.SAMPLE_DATE_WINDOW_DAYS)
        
        app.state.store = app_store
        app.state.booking_service = BookingService(app_store)
        logger.info("%s started with %s", settings.PROJECT_NAME, type(app_store).__name__)
        try:
            yield
        finally:
            app_store.close()
    
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="College bus seat booking API",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.settings = settings
    
    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_exception_handlers(app)
    
    # Include routers
    app.include_router(
        students_router,
        prefix=f"{settings.API_PREFIX}/student",
        tags=["Students"]
    )
    
    app.include_router(
        buses_router,
        prefix=f"{settings.API_PREFIX}/bus-routes",
        tags=["Bus Routes"]
    )
    
    app.include_router(
        bookings_router,
        prefix=f"{settings.API_PREFIX}/bookings",
        tags=["Bookings"]
    )
    
    app.include_router(
        system_router,
        prefix=f"{settings.API_PREFIX}/system",
        tags=["System"]
    )
    
    app.include_router(
        admin_router,
        prefix=f"{settings.API_PREFIX}/admin",
        tags=["Admin"]
    )
    
    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "message": settings.PROJECT_NAME,
            "version": "1.0.0",
            "docs": "/docs"
        }
    
    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}
    
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
