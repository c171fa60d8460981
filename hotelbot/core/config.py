from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    AUTO_REPLY_ENABLED: bool = False

    TWILIO_ACCOUNT_SID: str | None = None
    TWILIO_AUTH_TOKEN: str | None = None
    TWILIO_WHATSAPP_NUMBER: str | None = None
    # Externally visible base of this service, used to rebuild the URL Twilio signed.
    PUBLIC_BASE_URL: str | None = None

    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL_REPLY: str = "gpt-4o-mini"
    OPENAI_TEMPERATURE_REPLY: float = 0.2

    BOOKING_STORE_PATH: str = "./data/bookings.json"

    ARTIFACT_BACKEND: str = "local"  # "local" | "ftp"
    ARTIFACT_DIR: str = "./data/artifacts"
    ARTIFACT_BASE_URL: str = "http://localhost:8000/artifacts"
    FTP_HOST: str | None = None
    FTP_USER: str | None = None
    FTP_PASSWORD: str | None = None
    FTP_DIR: str = "/qr"

    SESSION_TTL_SECONDS: int = 1800

    HOTEL_NAME: str = "Hotel"
    DEFAULT_ROOM_ID: str = "1"
    DEFAULT_GUEST_NAME: str = "Huésped WhatsApp"
    DEFAULT_PARTY_SIZE: int = 1
    BOOKING_ORIGIN: str = "WhatsApp"


settings = Settings()
