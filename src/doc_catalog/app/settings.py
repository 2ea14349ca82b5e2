from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    # flat = easy env overrides
    name: str = "Document Catalog"
    load_samples: bool = True
    log_level: str | None = None
    log_format: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",        # CATALOG_LOAD_SAMPLES, CATALOG_LOG_LEVEL
        extra="ignore",
    )

@lru_cache
def get_catalog_settings(**kwargs) -> CatalogSettings:
    # Only include kwargs that are not None, so defaults in CatalogSettings are used
    filtered_kwargs = {k: v for k, v in kwargs.items() if v is not None}
    return CatalogSettings(**filtered_kwargs)
