from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Core
    log_level: str = "WARNING"

    # TheMealDB
    mealdb_base_url: str = "https://www.themealdb.com/api/json/v1/1"
    mealdb_timeout_s: float = 15
    mealdb_max_attempts: int = 1  # 1 = sin reintentos

    # Límites de búsqueda
    max_ingredients: int = 6
    min_ingredient_length: int = 2
    max_results_to_show: int = 10

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log_level: {v}")
        return level

    @model_validator(mode="after")
    def _validate_limits(self) -> "Settings":
        for name in ("max_ingredients", "min_ingredient_length", "max_results_to_show", "mealdb_max_attempts"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be a positive integer")
        if self.mealdb_timeout_s <= 0:
            raise ValueError("mealdb_timeout_s must be greater than zero")
        return self

settings = Settings()
