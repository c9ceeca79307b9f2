import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    service_name: str = os.getenv("SERVICE_NAME", "smartwaste")
    service_version: str = os.getenv("SERVICE_VERSION", "0.1.0")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Inventory settings
    seed_demo_data: bool = os.getenv("SEED_DEMO_DATA", "True").lower() == "true"
    dashboard_top_n: int = int(os.getenv("DASHBOARD_TOP_N", "3"))


settings = Settings()
