from fastapi import APIRouter

from app.api.routers import posts_router

router = APIRouter(prefix="/api")
router.include_router(posts_router.router, prefix="/posts", tags=["posts"])
