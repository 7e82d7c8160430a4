from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    cbioportal_api_url: str = "https://www.cbioportal.org/api"
    cbioportal_timeout: float = 60.0
    cbioportal_retry_attempts: int = 3
    log_level: str = "INFO"
    filter_by_protein_change: bool = True  # default for the HTTP surface

    class Config:
        env_file = ".env"
        env_prefix = "FUSIONSV_"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
