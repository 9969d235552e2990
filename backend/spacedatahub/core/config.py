from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "SpaceDataHub"
    API_V1_STR: str = "/api/v1"

    # NASA API key, passed explicitly to DonkiClient. DEMO_KEY is heavily rate limited.
    NASA_API_KEY: str = "DEMO_KEY"
    DONKI_BASE_URL: str = "https://api.nasa.gov/DONKI"
    DONKI_LOOKBACK_DAYS: int = 10
    DONKI_TIMEOUT_SECONDS: float = 30.0

    LOG_LEVEL: str = "INFO"

    class Config:
        case_sensitive = True
        env_file = ".env"

settings = Settings()
