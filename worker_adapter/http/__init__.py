from .app import ActionRoute, create_app, load_routes

__all__ = ["ActionRoute", "create_app", "load_routes"]
