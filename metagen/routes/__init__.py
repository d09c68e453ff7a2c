from metagen.routes.api import router

__all__ = ["router"]
