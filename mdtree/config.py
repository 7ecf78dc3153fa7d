from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    max_render_depth: int = 100  # nesting levels, each node counts as one
    log_level: str = "WARNING"
    strict_parsing: bool = False  # raise on markdown the document model can't hold instead of skipping it

    model_config = SettingsConfigDict(
        env_prefix="MDTREE_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings from the environment, read once per process.

    Tests that change the environment must call ``get_settings.cache_clear()``.
    """
    return Settings()
