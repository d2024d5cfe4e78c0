from .settings import AdapterSettings, get_settings

__all__ = ["AdapterSettings", "get_settings"]
