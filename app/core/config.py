from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    APP_NAME: str = "Wardrobe Planner API"
    APP_ENV: str = "dev"
    API_PREFIX: str = "/v1"
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"
    REDIS_URL: str = "redis://localhost:6379/0"
    # LLM explanation flags (default to disabled)
    LLM_ENABLED: bool = False
    LLM_PROVIDER: str = "local"
    LLM_MODEL_EXPLAIN: str = "gpt-4o-mini"
    LLM_EXPLAIN_TIMEOUT_MS: int = 2500
    LLM_CACHE_TTL_S: int = 604800
    LLM_MAX_EXPLAINED_ITEMS: int = 40
    # Weather source (Open-Meteo)
    WEATHER_ENABLED: bool = True
    WEATHER_GEOCODING_URL: str = "https://geocoding-api.open-meteo.com/v1/search"
    WEATHER_FORECAST_URL: str = "https://api.open-meteo.com/v1/forecast"
    WEATHER_TIMEOUT_S: float = 5.0
    # Recommendations
    WEAR_RECOMMENDATION_LIMIT: int = 20

    @property
    def cors_origin_list(self) -> List[str]:
        val = self.CORS_ORIGINS
        if not val: return []
        if val == "*": return ["*"]
        return [v.strip() for v in val.split(",")]

settings = Settings()
