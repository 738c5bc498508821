"""Configuration settings for the application."""
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field
from dotenv import load_dotenv

# Ensure .env values are loaded into os.environ so downstream clients (e.g., Langfuse)
# can read them at import-time.
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # An empty key is accepted at startup; the remote call fails instead.
    openai_api_key: str = Field(default="", alias="OPENAI_API_KEY")
    # Gemini exposes an OpenAI-compatible endpoint
    openai_api_base: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/openai/",
        alias="OPENAI_API_BASE"
    )
    chat_model: str = Field(default="gemini-2.5-flash", alias="CHAT_MODEL")
    # LLM request timeout in seconds (unset: whatever the transport applies)
    llm_timeout: Optional[float] = Field(default=None, alias="LLM_TIMEOUT")
    llm_temperature: Optional[float] = Field(default=None, alias="LLM_TEMPERATURE")
    project_name: str = "Gestion Stock Pro"
    api_version: str = "v1"
    # Langfuse observability. The Langfuse SDK reads these env vars itself;
    # they are declared here so .env and settings document them in one place.
    langfuse_base_url: str = Field(default="", alias="LANGFUSE_BASE_URL")
    langfuse_secret_key: str = Field(default="", alias="LANGFUSE_SECRET_KEY")
    langfuse_public_key: str = Field(default="", alias="LANGFUSE_PUBLIC_KEY")
    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: str = Field(default="", alias="LOG_FILE")
    # Comma separated list of allowed origins
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")
    
    class Config:
        env_file = ".env"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
