from .core.env import Env, get_env, pick
from .settings import CatalogSettings, get_catalog_settings

__all__ = [
    "Env",
    "get_env",
    "pick",
    "CatalogSettings",
    "get_catalog_settings",
]
