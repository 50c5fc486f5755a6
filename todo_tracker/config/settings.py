"""
Application settings and configuration
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


class Settings:
    """Application settings loaded from environment variables"""

    # Storage
    TODO_FILE: str = os.getenv("TODO_FILE", "todos.json")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", "")

    # Web service
    WEB_HOST: str = os.getenv("WEB_HOST", "127.0.0.1")
    WEB_PORT: int = int(os.getenv("WEB_PORT", "8000"))

    @classmethod
    def validate(cls) -> bool:
        """Validate that settings hold usable values"""
        if not cls.TODO_FILE:
            raise ValueError("TODO_FILE must not be empty")

        if not 0 < cls.WEB_PORT < 65536:
            raise ValueError(f"WEB_PORT out of range: {cls.WEB_PORT}")

        return True


# Global settings instance
settings = Settings()
