"""
Health Check Route

Liveness probe for the SEO analyzer. It does not contact SerpAPI or the
completion provider, so it stays green while either upstream is down.
"""

from fastapi import APIRouter

router = APIRouter()

SERVICE_NAME = "youtube-seo-analyzer"


@router.get("/health")
async def health_check():
    return {"status": "healthy", "service": SERVICE_NAME}
