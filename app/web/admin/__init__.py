"""
Admin Routes Package
"""

from app.web.admin.counter_routes import router as counter_router

__all__ = [
    "counter_router",
]
