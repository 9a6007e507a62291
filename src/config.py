from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Ajjawe Catalog"
    debug: bool = False
    log_level: str = "INFO"

    catalog_api_base_url: str = "https://ajjawe.ps"
    catalog_api_timeout: float = 30.0

    default_language: str = "en"
    brand_sort_strategy: str = "priority_list"
    group_new_products: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False


settings = Settings()
