from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Google Maps Platform key (Street View Embed + Places Nearby Search)
    GOOGLE_KEY: str = ""

    HOST: str = "0.0.0.0"
    PORT: int = 5000

    LOGGER: int = 20

    # Provider request settings
    HTTP_TIMEOUT: float = 10.0
    PLACES_RADIUS: int = 1500

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
