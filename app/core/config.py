import os
from typing import List

class Settings:
    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # Upstream feeds
    NEWS_URL: str = os.getenv("NEWS_URL", "http://slowpoke.desigens.com/json/1/7000")
    PHRASE_URL: str = os.getenv("PHRASE_URL", "http://slowpoke.desigens.com/json/2/3000")
    NEWS_TIMEOUT_MS: int = int(os.getenv("NEWS_TIMEOUT_MS", "6000"))
    PHRASE_TIMEOUT_MS: int = int(os.getenv("PHRASE_TIMEOUT_MS", "6000"))

    # Files (relative to the working directory)
    STATIC_ROOT: str = os.getenv("STATIC_ROOT", "public")
    TEMPLATE_PATH: str = os.getenv("TEMPLATE_PATH", "public/template.html")

    # Logging
    ERROR_LOG_PATH: str = os.getenv("ERROR_LOG_PATH", "errors.log")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Template helpers
    DISPLAY_TIMEZONE: str = os.getenv("DISPLAY_TIMEZONE", "Europe/Moscow")
    BOLD_WORDS: List[str] = [
        w.strip() for w in os.getenv("BOLD_WORDS", "привет,privet").split(",") if w.strip()
    ]

settings = Settings()
