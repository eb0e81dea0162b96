from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "estructura360"
    COMPANY_NAME: str = "Estructura 360"
    LOG_LEVEL: str = "INFO"

    # Budget fallbacks when an item has no material prices (MXN per m²)
    SLAB_RATE_PER_M2: float = 450.00
    WALL_RATE_PER_M2: float = 320.00
    PROFIT_MARGIN_DEFAULT: float = 20.0
    LABOR_COST_PER_M2_DEFAULT: float = 0.0

    # Largest plan dimension the HTTP endpoints will lay out (m)
    MAX_DIMENSION_M: float = 1000.0

    class Config:
        env_file = ".env"


settings = Settings()
