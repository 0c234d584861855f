from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookingmx.infrastructure.config import settings
from bookingmx.infrastructure.logger_config import configure_logging
from bookingmx.presentation.exception_handlers import register_exception_handlers
from bookingmx.presentation.routers import router

configure_logging(settings.log_level)

app = FastAPI(title="BookingMX Reservations")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)
app.include_router(router)
