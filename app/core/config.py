from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Banco de dados
    DATABASE_URL: str = "sqlite:///./roommates.db"
    DATABASE_ECHO: bool = False

    # logging
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    class Config:
        env_file = ".env"


settings = Settings()
