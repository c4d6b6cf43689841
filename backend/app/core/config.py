from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    app_name: str = "Restaurant Bill Splitter API"
    app_version: str = "1.0.0"
    debug: bool = False

    # API settings
    api_v1_str: str = "/api/v1"

    # CORS settings
    backend_cors_origins: List[str] = [
        "http://localhost:3000",  # React dev server
        "http://localhost:8501",  # Streamlit default port
        "http://127.0.0.1:8501",
    ]
    allowed_hosts: List[str] = ["localhost", "127.0.0.1", "0.0.0.0", "testserver"]

    class Config:
        env_file = ".env"
        # Allow extra fields so frontend/console env vars don't cause validation errors
        extra = "ignore"


settings = Settings()
