import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Relative to the shopfront.app package
    TEMPLATE_FOLDER = "templates"
    PUBLIC_FOLDER = "public"

    # Loopback only, not read from the environment
    APP_HOST = "localhost"
    APP_PORT = 3000
