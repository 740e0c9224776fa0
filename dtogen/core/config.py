from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "entity-dto-converter"
    api_host: str = "0.0.0.0"
    api_port: int = 5555
    client_url: str = "http://localhost:3333"
    log_level: str = "INFO"

    default_force_optional: bool = True
    default_strip_audit: bool = True

    common_dto_import: str = "src/common/dto/common.dto"
    transformer_import: str = "src/common/util/transformer"

settings = Settings()
