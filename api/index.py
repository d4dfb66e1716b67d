"""
medshop - Main FastAPI Application

Single entry point for storefront and back-office API routes.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from medshop import __version__, config
from medshop.logging import get_logger
from medshop.routers import admin_router, cart_router, products_router, settings_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    logger.info(f"medshop starting (cart storage: {config.CART_STORAGE_BACKEND})")
    yield


app = FastAPI(
    title="medshop",
    description="Medical supplies storefront and back-office API",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(cart_router, prefix="/api")
app.include_router(products_router, prefix="/api")
app.include_router(settings_router, prefix="/api")
app.include_router(admin_router, prefix="/api")


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "medshop"}
