# backend/app/config.py

import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
# Useful for local development
env_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), '.env')
load_dotenv(dotenv_path=env_path)

class Settings(BaseSettings):
    """Application settings."""

    # PokeAPI base URL (paths are appended with a trailing slash)
    pokeapi_base_url: str = "https://pokeapi.co/api/v2/"

    # Sent with every PokeAPI request
    user_agent: str = "PokeAtlas/1.0"

    # HTTP timeouts in seconds
    request_timeout_seconds: float = 10.0
    connect_timeout_seconds: float = 5.0

    # Defaults for the region list and encounter table
    default_region: str = "kanto"
    default_version: str = "firered"

    # Species description length on the detail page
    summary_max_length: int = 160

    log_level: str = "INFO"

    class Config:
        # Specifies the .env file encoding
        env_file_encoding = 'utf-8'


# Create a single instance of the settings to be imported in other modules
settings = Settings()
