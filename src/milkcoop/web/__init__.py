from milkcoop.web.errors import register_error_handlers
from milkcoop.web.router import api_router

__all__ = ["api_router", "register_error_handlers"]
