from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console output

    # Greek
    GREEK_ALTERNATE_ENCODING: str = "strippedVowelLength"  # or "strippedDiaeresis"
    GREEK_PRONOUN_FORMS_FILE: str | None = None  # Overrides the bundled pronoun catalogue

    class Config:
        env_prefix = "LEXIS_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
