from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    app_title: str = "Mortgage Calculator"
    debug: bool = False
    log_level: str = "INFO"

    # Dashboard server
    dashboard_host: str = "127.0.0.1"
    dashboard_port: int = 8050

    # Input widget bounds (display hints only, the engine does not enforce them)
    max_term_years: int = 50
    max_rate_pct: float = 100.0


settings = Settings()
