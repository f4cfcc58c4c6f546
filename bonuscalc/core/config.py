from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # SQLite по умолчанию, key-value таблица с настройками калькулятора.
    DATABASE_URL: str = "sqlite:///./bonuscalc.db"

    # --- Tier defaults ---
    # 40k * (3, 5, 10) = 120k / 200k / 400k (monthly), x3 for quarterly
    DEFAULT_MONTHLY_SALARY: float = 40_000

    # monthly / quarterly, 3 bounded tiers + top tier (в процентах)
    DEFAULT_RATES_PERCENT: list[float] = [3.0, 5.0, 10.0, 10.0]

    # --- Display ---
    CURRENCY_SYMBOL: str = "$"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
