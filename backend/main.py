from dotenv import load_dotenv
load_dotenv()

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from database import get_db, close_client

# ENV
from config.env import ENV, LOG_LEVEL, CORS_ALLOWED_ORIGINS, is_production, validate_production_env

# ROUTES
from routes.auth import router as auth_router
from routes.users import router as users_router
from routes.admin import router as admin_router
from routes.plants import router as plants_router
from routes.orders import router as orders_router
from routes.payments import router as payments_router

from utils.indexes import ensure_indexes

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("plantnet")

logger.info("ENV: %s", ENV)

app = FastAPI(
    title="PlantNet API",
    version="1.0.0",
    docs_url=None if is_production() else "/docs",
    redoc_url=None if is_production() else "/redoc",
    openapi_url=None if is_production() else "/openapi.json",
)

# -----------------------------
# CORS
# -----------------------------

allowed_origins = [origin.strip() for origin in CORS_ALLOWED_ORIGINS if origin.strip()]
if not allowed_origins:
    allowed_origins = [
        "http://localhost:5173",
        "http://localhost:5174",
    ]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -----------------------------
# ROUTES
# -----------------------------

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(admin_router)
app.include_router(plants_router)
app.include_router(orders_router)
app.include_router(payments_router)

# -----------------------------
# HEALTH CHECKS
# -----------------------------

@app.get("/")
async def root():
    return "Hello from plantNet Server.."


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/health/db")
async def health_db():
    db = get_db()
    await db.command("ping")
    return {"status": "mongodb connected"}

# -----------------------------
# LIFECYCLE
# -----------------------------

@app.on_event("startup")
async def on_startup():
    validate_production_env()
    await ensure_indexes(get_db())
    logger.info("plantNet is ready")


@app.on_event("shutdown")
async def on_shutdown():
    close_client()
