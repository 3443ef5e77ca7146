from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    service_name: str = "travel-booking"
    log_level: str = "WARNING"

    # Pricing
    default_currency: str = "USD"

    # Console
    selection_cancel: int = -1
    input_cancel: str = "e"

    model_config = {
        "env_prefix": "TRAVEL_BOOKING_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
