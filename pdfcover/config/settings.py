from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    preview_scale: float = 1.2
    scale_mode: str = "preview"

    output_filename: str = "merged-replaced.pdf"
    output_dir: str = "."

    font_name: str = "helv"
    default_padding: float = 0.0
    default_radius: float = 0.0
    default_font_size: float = 12.0
    default_color: str = "#064e3b"

    pdf_backend: str = "pymupdf"
    pdf_engine: str = "pdfplumber"
