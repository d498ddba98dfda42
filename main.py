from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from api.routes import geocoding, map_view, nearby, routing
from core.config import settings
from services.places import close_place_locator
from services.routing import close_route_planner

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Set specific log levels
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)  # Reduce noise from access logs
logging.getLogger("httpx").setLevel(logging.WARNING)  # One line per provider request otherwise


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Release provider HTTP clients
    await close_place_locator()
    await close_route_planner()


app = FastAPI(
    title="Nearby Navigator API",
    description="Nearby lodging and schools, schematic maps and turn-by-turn routes",
    version="1.0.0",
    lifespan=lifespan
)

# Origins allowed to call the API (comma-separated), everything when unset
allowed_origins = settings.ALLOWED_ORIGINS.split(",") if settings.ALLOWED_ORIGINS else ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Include routers
app.include_router(nearby.router)
app.include_router(routing.router)
app.include_router(geocoding.router)
app.include_router(map_view.router)


@app.get("/")
async def root():
    return {"message": "Nearby Navigator API", "status": "running"}


@app.get("/health")
async def health():
    return {"status": "healthy"}
