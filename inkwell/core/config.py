from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # Database
    DATABASE_URL: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "inkwell"
    DB_PASSWORD: str = "inkwell_password"
    DB_NAME: str = "inkwell_db"
    DEBUG: bool = False  # Echo SQL statements
    AUTO_CREATE_TABLES: bool = False  # Development only, migrations are managed by Alembic

    @property
    def database_url(self) -> str:
        # Pin the psycopg2 driver; bare postgresql:// means psycopg 3 on SQLAlchemy 2.1
        if self.DATABASE_URL:
            if self.DATABASE_URL.startswith("postgresql://"):
                return "postgresql+psycopg2://" + self.DATABASE_URL[len("postgresql://"):]
            return self.DATABASE_URL
        return f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # Server
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 2022
    LOG_LEVEL: str = "INFO"

    # URLs
    FRONTEND_URL: str = "http://localhost:3000"

    @property
    def cors_origins(self) -> list[str]:
        origins = [
            self.FRONTEND_URL,
            "http://localhost:3000",  # React default
            "http://localhost:5173",  # Vite default
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ]
        # Keep order, drop duplicates
        return list(dict.fromkeys(origins))

    class Config:
        env_file = ".env"
        extra = "ignore"  # Allow extra fields in .env file

settings = Settings()
