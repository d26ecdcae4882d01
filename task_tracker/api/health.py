"""Health check endpoints"""

from fastapi import APIRouter

from task_tracker import config

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/")
async def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": "task-tracker",
        "store": config.TASK_STORE_BACKEND,
    }
