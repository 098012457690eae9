from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]
    # Whether the booking gate accepts "deluxe" meals; pricing always knows them.
    deluxe_meal_selectable: bool = False
