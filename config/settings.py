from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Strength is an exponent: iterations = 2 ** strength
    PASSWORD_DEFAULT_STRENGTH: int = 12
    PASSWORD_MIN_RECOMMENDED_STRENGTH: int = 10  # warn-only, never enforced

    # Random source
    PASSWORD_SALT_BYTES: int = 16
    ENTROPY_DEVICE: str = "/dev/urandom"


settings = Settings()
