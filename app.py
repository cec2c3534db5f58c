"""
FastAPI Application

Main application initialization and route registration.
"""

from fastapi import FastAPI

from routes.health import router as health_router
from routes.seo import router as seo_router

# Initialize FastAPI app
app = FastAPI(
    title="YouTube SEO Analyzer API",
    description="AI-generated YouTube SEO reports grounded in live competitor data",
    version="0.1.0"
)

# Register REST API routers
app.include_router(health_router)
app.include_router(seo_router, prefix="/api")
