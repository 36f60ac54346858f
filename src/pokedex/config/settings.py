from typing import Optional
from dotenv import load_dotenv

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
load_dotenv()


class Settings(BaseSettings):
    # Upstream API
    api_base_url: str = "https://pokeapi.co/api/v2/"
    collection: str = "pokemon"
    batch_size: int = Field(default=151, gt=0)
    # None waits forever, like the browser client did
    request_timeout: Optional[float] = None

    # Service
    data_dir: str = "data"
    logs_dir: str = "logs"

    model_config = SettingsConfigDict(
        env_prefix="POKEDEX_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
