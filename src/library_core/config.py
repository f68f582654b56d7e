import os
from dotenv import load_dotenv

load_dotenv()

def _as_int(v: str | None, default: int) -> int:
    if v is None or not v.strip():
        return default
    return int(v)

class Settings:
    # App
    APP_NAME: str = os.getenv("APP_NAME", "library-core")
    ENV: str = os.getenv("ENV", "dev")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Préstamos
    LOAN_DAYS: int = _as_int(os.getenv("LOAN_DAYS"), 14)
    LARGE_BOOK_PAGES: int = _as_int(os.getenv("LARGE_BOOK_PAGES"), 300)

    # Biblioteca de la demo
    LIBRARY_NAME: str = os.getenv("LIBRARY_NAME", "Biblioteca Central")
    LIBRARY_ADDRESS: str = os.getenv("LIBRARY_ADDRESS", "Av. Principal 123")

settings = Settings()
