import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smartwaste.core.config import settings
from smartwaste.db.database import create_session
from smartwaste.routers.dashboard import router as dashboard_router
from smartwaste.routers.inventory import router as inventory_router
from smartwaste.routers.logs import router as logs_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_session(seed=settings.seed_demo_data)
    logger.info("Started %s %s (demo data: %s)", settings.service_name, settings.service_version, settings.seed_demo_data)
    yield


app = FastAPI(
    title="SmartWaste API",
    description="Perishable stock tracking and waste logging for small cafés and restaurants",
    version=settings.service_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(inventory_router, prefix="/inventory", tags=["inventory"])
app.include_router(logs_router, prefix="/logs", tags=["logs"])
app.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])


@app.get("/")
async def root():
    return {"service": settings.service_name, "version": settings.service_version}


if __name__ == "__main__":
    uvicorn.run("smartwaste.main:app", host=settings.host, port=settings.port, reload=True)
