from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogs import router as blogs_router
from brand_monitor import router as brand_monitor_router
from core import config, db, errors, logs
from geo_files import router as geo_files_router
from pages import router as pages_router
from topics import router as topics_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process (skipped without DATABASE_URL).
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


logs.configure_logging()

app = FastAPI(lifespan=lifespan)

# Allow the web frontend to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

errors.install_handlers(app)

app.include_router(brand_monitor_router.router, tags=["brand-monitor"])
app.include_router(geo_files_router.router, tags=["geo-files"])
app.include_router(blogs_router.router, tags=["blogs"])
app.include_router(topics_router.router, tags=["topics"])
app.include_router(pages_router.router, tags=["pages"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "brand-monitor api"}
