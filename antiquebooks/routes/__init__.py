"""API routes."""

from fastapi import APIRouter

from antiquebooks.routes import cart, ui

api_router = APIRouter()

# UI endpoints (page bootstrap payloads)
api_router.include_router(ui.router, prefix="/v1/ui", tags=["ui"])

# Cart endpoints
api_router.include_router(cart.router, prefix="/v1/cart", tags=["cart"])
