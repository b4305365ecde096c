from pydantic_settings import BaseSettings
from typing import List, Literal, Optional

class Settings(BaseSettings):
    # 1️⃣ App
    APP_NAME: str = "Portfolio Backend"
    LOG_LEVEL: str = "INFO"

    # 2️⃣ Contact storage
    CONTACT_STORE_BACKEND: Literal["sql", "memory"] = "sql"
    DATABASE_URL: str = "sqlite:///./portfolio.db"
    DATABASE_ECHO: bool = False

    # 3️⃣ GitHub proxy
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_TOKEN: Optional[str] = None
    GITHUB_TIMEOUT_SECONDS: float = 5.0
    GITHUB_USER_AGENT: str = "portfolio-backend"

    # 4️⃣ Response copy shown by the frontend
    CONTACT_SUCCESS_MESSAGE: str = "Your message has been sent successfully!"
    VALIDATION_ERROR_MESSAGE: str = "Invalid form data"
    INTERNAL_ERROR_MESSAGE: str = "Internal server error"
    GITHUB_USER_ERROR_MESSAGE: str = "An error occurred while fetching GitHub data"
    GITHUB_REPOS_ERROR_MESSAGE: str = "An error occurred while fetching GitHub repository data"

    # frontend origins
    FRONTEND_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # optional, for safety

settings = Settings()
