from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Storage settings
    local_memorial_store_path: str = "data/memorials.json"

    # Kinship settings
    default_relation: str = "friend"  # used when a guestbook relation cannot be normalized
    search_limit: int = 10

    # Web server settings
    cors_allow_origins: list[str] = ["*"]

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
