from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    NASA_API_KEY: str = "DEMO_KEY"
    APOD_API_URL: str = "https://api.nasa.gov/planetary/apod"

    APOD_ARCHIVE_INDEX_URL: str = "https://apod.nasa.gov/apod/archivepixFull.html"
    APOD_ARCHIVE_BASE_URL: str = "https://apod.nasa.gov/apod/"

    # Prefix the URL-encoded target is appended to, e.g. "https://api.allorigins.win/raw?url="
    PROXY_URL: str = ""

    HTTP_TIMEOUT: float = 30.0
    USER_AGENT: str = "apod-gallery/0.1"

    DEFAULT_COUNT: int = 9
    NOISE_IMAGE_MARKERS: list[str] = ["logo", "icon", "spacer"]

    LOG_LEVEL: str = "INFO"

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

settings = Settings()
