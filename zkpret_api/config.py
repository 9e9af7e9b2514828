"""
Configuration for the ZK-PRET API.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    API configuration settings.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Server
    host: str = Field(default="127.0.0.1", description="API host")
    # Hosting platforms inject PORT
    port: int = Field(default=8000, description="API port")
    debug: bool = Field(default=False, description="Enable debug mode (uvicorn reload)")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: str = Field(default="json", description="Log renderer: json or console")

    # Service identity
    service_name: str = Field(
        default="zk-pret-core-engine",
        description="Service name reported by the health check",
    )
    catalog_service: str = Field(
        default="zkpretcore",
        description="Service name reported by the endpoint catalog",
    )

    # Proof generation
    default_network: str = Field(
        default="TESTNET",
        description="Network used when a request omits typeOfNet",
    )
    latency_scale: float = Field(
        default=1.0,
        ge=0.0,
        description="Multiplier applied to the simulated proof latency envelope",
    )

    # CORS
    cors_allow_origin: str = Field(default="*", description="Access-Control-Allow-Origin")
    cors_allow_methods: str = Field(
        default="GET, POST, PUT, DELETE, OPTIONS",
        description="Access-Control-Allow-Methods",
    )
    cors_allow_headers: str = Field(
        default="Content-Type, Authorization",
        description="Access-Control-Allow-Headers",
    )

    def cors_headers(self) -> dict[str, str]:
        """Headers attached to every response."""
        return {
            "Access-Control-Allow-Origin": self.cors_allow_origin,
            "Access-Control-Allow-Methods": self.cors_allow_methods,
            "Access-Control-Allow-Headers": self.cors_allow_headers,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
