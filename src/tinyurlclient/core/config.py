from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Shortening endpoint
    api_create_url: str = "https://tinyurl.com/api-create.php"

    # Every successful response starts with this
    short_url_prefix: str = "https://tinyurl.com/"

    # Only applied to transports the client creates itself
    timeout_seconds: float = 30.0

    class Config:
        env_prefix = "TINYURL_"
        env_file = ".env"


settings = Settings()
