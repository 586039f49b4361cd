from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from config import settings
from constants import ServerConfig
from init_db import init_database
from api import customers, products
from services.schema_validator import SchemaValidator
from utils.logging_utils import configure_logging
import logging
import sys

# Configure logging with rotating file handler
LOG_FILE = configure_logging(settings.LOG_DIR, settings.LOG_LEVEL)

logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {LOG_FILE}")


# App State
class AppState:
    NORMAL = "NORMAL"
    MAINTENANCE = "MAINTENANCE"

CURRENT_APP_STATE = AppState.NORMAL
SCHEMA_STATUS = None


def refresh_schema_status(bind=None):
    """Re-run schema validation and switch to maintenance mode if it fails"""
    global CURRENT_APP_STATE, SCHEMA_STATUS
    SCHEMA_STATUS = SchemaValidator.check(bind)

    if not SCHEMA_STATUS["valid"]:
        logger.error("❌ Database schema validation failed - Entering MAINTENANCE MODE")
        CURRENT_APP_STATE = AppState.MAINTENANCE
    else:
        CURRENT_APP_STATE = AppState.NORMAL
    return SCHEMA_STATUS


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info("Initializing database...")
    init_database()
    refresh_schema_status()

    yield

    logger.info("Application shutdown complete")


app = FastAPI(
    title=ServerConfig.TITLE,
    description="Customer accounts and product catalogue",
    version=ServerConfig.VERSION,
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(customers.router, prefix=ServerConfig.API_PREFIX, tags=["customers"])
app.include_router(products.router, prefix=ServerConfig.API_PREFIX, tags=["products"])


# System Status

@app.get("/api/system/status")
def get_system_status():
    """Get current application state and schema status"""
    return {
        "state": CURRENT_APP_STATE,
        "schema_status": SCHEMA_STATUS
    }


@app.get("/api/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "service": ServerConfig.TITLE,
        "version": ServerConfig.VERSION
    }


if __name__ == "__main__":
    import uvicorn
    import socket

    # Check if port is available
    def is_port_in_use(port: int) -> bool:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            try:
                s.bind((settings.HOST, port))
                return False
            except OSError:
                return True

    if is_port_in_use(settings.PORT):
        logger.error(f"❌ Port {settings.PORT} is already in use!")
        logger.error(f"   To fix: Run 'lsof -ti:{settings.PORT} | xargs kill -9'")
        sys.exit(1)

    logger.info(f"🚀 Starting {ServerConfig.TITLE} on http://{settings.HOST}:{settings.PORT}...")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
