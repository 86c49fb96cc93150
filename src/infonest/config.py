from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    server_host: str = "0.0.0.0"
    server_port: int = 8080
    jwt_secret: str = "changeme"
    # Access token lifetime (seconds). Default: 1 hour
    access_token_ttl_seconds: int = 3600
    # REST backend used when use_mock_api is off
    api_base_url: str = "http://localhost:8080/api/v1"
    api_timeout_seconds: float = 10.0
    use_mock_api: bool = True
    # key under which the shell persists the auth token between runs
    session_token_key: str = "auth_token"
    min_password_length: int = 8

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


# module-level settings instance for convenience across the app
settings = Settings()
