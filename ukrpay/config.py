"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database (form state persistence)
    database_url: str = "sqlite:///./ukrpay.db"
    form_state_key: str = "nbu_qr_generator_data"

    # Service
    service_name: str = "ukrpay"
    log_level: str = "INFO"

    # Payment defaults
    default_currency: str = "UAH"
    default_qr_version: str = "002"

    # QR rendering
    qr_error_correction: str = "Q"
    qr_border: int = 4
    qr_svg_size: int = 240  # Pixels, on-screen preview
    qr_png_size: int = 1000  # Pixels, exported image


settings = Settings()
