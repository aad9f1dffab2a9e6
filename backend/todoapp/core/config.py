from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseModel):
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./todos.db")
    environment: str = os.getenv("ENVIRONMENT", "development")

    jwt_secret: str = os.getenv("JWT_SECRET", "change-me")
    jwt_expire_minutes: int = int(os.getenv("JWT_EXPIRE_MINUTES", "10080"))
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "session")

    firebase_project_id: str = os.getenv("FIREBASE_PROJECT_ID", "")
    firebase_credentials: str = os.getenv("FIREBASE_CREDENTIALS", "")

    cors_origins: list[str] = _split_csv(
        os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
    )
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


settings = Settings()
