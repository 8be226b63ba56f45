"""Configuration settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class NWSConfig(BaseSettings):
    """NOAA NWS API configuration for nearby station observations."""

    base_url: str = "https://api.weather.gov"
    user_agent: str = "noaa-observations/0.1 (Signal K NOAA Observations)"
    radius_nm: float = 100.0
    check_interval_minutes: float = 15.0
    initial_delay_seconds: float = 5.0  # Position data is not available right away
    max_concurrent: int = 5
    timeout_seconds: float = 30.0

    model_config = {"env_prefix": "NWS_"}


class PositionConfig(BaseSettings):
    """Fixed position used when no live position feed is wired in."""

    latitude: float | None = None
    longitude: float | None = None

    model_config = {"env_prefix": "POSITION_"}


class KafkaConfig(BaseSettings):
    """Kafka connection configuration."""

    enabled: bool = False
    bootstrap_servers: str = "localhost:9092"
    update_topic: str = "observations.noaa"

    model_config = {"env_prefix": "KAFKA_"}


class JSONLConfig(BaseSettings):
    """JSON-lines output configuration."""

    enabled: bool = True
    path: str = "./data/observations.jsonl"

    model_config = {"env_prefix": "JSONL_"}


class Settings(BaseSettings):
    """Application settings combining all configs."""

    log_level: str = "INFO"
    nws: NWSConfig = NWSConfig()
    position: PositionConfig = PositionConfig()
    kafka: KafkaConfig = KafkaConfig()
    jsonl: JSONLConfig = JSONLConfig()


def get_settings() -> Settings:
    """Load settings from environment."""
    return Settings()
