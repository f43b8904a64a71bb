import os
import pathlib
from typing import List
from dotenv import load_dotenv

ROOT_DIR = pathlib.Path(__file__).resolve().parent.parent.parent
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY")
    AMADEUS_API_KEY: str = os.getenv("AMADEUS_API_KEY")
    AMADEUS_API_SECRET: str = os.getenv("AMADEUS_API_SECRET")
    PIXABAY_API_KEY: str = os.getenv("PIXABAY_API_KEY")

    AMADEUS_BASE_URL: str = os.getenv("AMADEUS_BASE_URL", "https://test.api.amadeus.com")
    AMADEUS_TOKEN_CACHE: bool = _env_flag("AMADEUS_TOKEN_CACHE")
    PIXABAY_URL: str = os.getenv("PIXABAY_URL", "https://pixabay.com/api/")
    # Clamped to 1..5 by the image search service
    MAX_IMAGE_RESULTS: int = int(os.getenv("MAX_IMAGE_RESULTS", "5"))

    LLM_MODEL: str = os.getenv("LLM_MODEL", "gpt-4")
    LLM_TIMEOUT: float = float(os.getenv("LLM_TIMEOUT", "60"))
    # Applies to every requests-based outbound call (Amadeus, Pixabay)
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "15"))

    FRONTEND_ORIGIN: str = os.getenv("FRONTEND_ORIGIN", "http://localhost:3000")
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "4000"))

    def validate(self):
        missing_keys: List[str] = []
        if not self.OPENAI_API_KEY:
            missing_keys.append("OPENAI_API_KEY")
        if not self.AMADEUS_API_KEY:
            missing_keys.append("AMADEUS_API_KEY")
        if not self.AMADEUS_API_SECRET:
            missing_keys.append("AMADEUS_API_SECRET")
        if missing_keys:
            raise ValueError(f"Missing environment variables: {', '.join(missing_keys)}")
        return True


settings = Settings()
