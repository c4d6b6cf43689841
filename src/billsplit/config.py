from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    currency_symbol: str = "$"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_rotation: str = "1 MB"

    class Config:
        env_file = ".env"
        env_prefix = "BILLSPLIT_"
        extra = "ignore"


settings = Settings()
