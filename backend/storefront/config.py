import os


class Config:
    # Server
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Load the fixed sample catalog when the app starts
    SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "true").lower() == "true"

    # Catalog client
    API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
    API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))
    PAGE_SIZE = int(os.getenv("PAGE_SIZE", "12"))
