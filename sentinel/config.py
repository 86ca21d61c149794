# Import the standard library module used for environment variables
import os

# Import helper to load environment variables from a .env file
from dotenv import load_dotenv


# Load variables from a .env file into process environment if present
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Define a configuration holder class for the Flask application
class Config:
    # Secret key used by Flask and extensions; falls back to a dev value
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")

    APP_NAME = os.getenv("APP_NAME", "Sentinel")

    # Interface and port the standalone runner binds to
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3001"))

    # Comma-separated list of CORS origins; '*' means allow all
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Socket.IO async mode override (e.g., 'gevent', 'threading'); empty means auto-detect
    SOCKETIO_ASYNC_MODE = os.getenv("SOCKETIO_ASYNC_MODE", "")

    # Comma-separated identities allowed to log into the admin channel
    ADMIN_EMAILS = os.getenv("ADMIN_EMAILS", "")

    # Stale-session reaper: run every REAPER_INTERVAL_SECONDS and evict sessions
    # that have been silent for longer than SESSION_MAX_IDLE_SECONDS
    REAPER_ENABLED = _env_bool("REAPER_ENABLED", "true")
    REAPER_INTERVAL_SECONDS = int(os.getenv("REAPER_INTERVAL_SECONDS", "60"))
    SESSION_MAX_IDLE_SECONDS = int(os.getenv("SESSION_MAX_IDLE_SECONDS", "300"))

    DEBUG = _env_bool("DEBUG", "false")

    # Global logging level
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
