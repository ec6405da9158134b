"""HTML routes (public site, login, admin)."""

from fastapi import APIRouter

from pacs_site.api.web import admin, auth, public

router = APIRouter()
router.include_router(public.router, tags=["site"])
router.include_router(auth.router, tags=["auth"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
