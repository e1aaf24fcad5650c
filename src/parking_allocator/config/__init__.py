from .settings_env import Settings, settings

__all__ = ["Settings", "settings"]
