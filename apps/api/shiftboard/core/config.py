from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    database_url: str = "sqlite:///./shiftboard.db"

    # Comma-separated list, e.g.:
    # CORS_ORIGINS="http://localhost:3000,https://shiftboard-web.onrender.com"
    cors_origins: str = ""
    log_level: str = "INFO"

    class Config:
        env_file = ".env"

    @property
    def allow_origins(self) -> list[str]:
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        # Safe fallback for local dev if env var not set
        return origins or ["http://localhost:3000", "http://127.0.0.1:3000"]

settings = Settings()
