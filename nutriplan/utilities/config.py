"""Configuration management for the NutriPlan application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# AI provider
OPENAI_MODEL: Final[str] = os.getenv('NUTRIPLAN_MODEL', 'gpt-4o-mini')
GENERATED_LANGUAGE: Final[str] = os.getenv('NUTRIPLAN_LANGUAGE', 'Portuguese')
MISSING_API_KEY_WARNING: Final[str] = (
    "OPENAI_API_KEY is not set. Macro calculation and meal plan generation are unavailable."
)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'debug' if DEBUG else 'info').lower()

# Sessions (in-memory only)
SESSION_COOKIE: Final[str] = os.getenv('SESSION_COOKIE', 'nutriplan_session')
MAX_SESSIONS: Final[int] = int(os.getenv('MAX_SESSIONS', '500'))


def get_api_key() -> str:
    """Return the provider key, read at call time so a late export is picked up."""
    return os.environ.get('OPENAI_API_KEY', '').strip()


def api_key_configured() -> bool:
    return bool(get_api_key())
