from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from bas_atlas import __version__


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "BAS Atlas"
    debug: bool = False
    log_level: str = "INFO"

    data_dir: str = "data"
    dist_dir: str = "dist"
    canonical_path: str = "canonical/index.json"
    schemas_dir: str = "schemas"

    build_version: str = __version__

    # Epoch seconds; pins lastUpdated for reproducible builds.
    source_date_epoch: Optional[str] = None


settings = Settings()
