"""Configuration management for the cafe cost engine."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Settings defaults merged under whatever the caller stored
DEFAULT_TARGET_MARGIN_PERCENT: Final[float] = float(os.getenv('DEFAULT_TARGET_MARGIN_PERCENT', '65'))
DEFAULT_ROUNDING_UNIT: Final[int] = int(os.getenv('DEFAULT_ROUNDING_UNIT', '100'))
DEFAULT_MONTHLY_SALES_VOLUME: Final[float] = float(os.getenv('DEFAULT_MONTHLY_SALES_VOLUME', '1000'))
DEFAULT_INCLUDE_OVERHEAD: Final[bool] = os.getenv('DEFAULT_INCLUDE_OVERHEAD', 'True').lower() == 'true'
DEFAULT_CATEGORY_MIX: Final[dict[str, float]] = {"drink": 25, "dessert": 25, "food": 25, "etc": 25}

# Tax estimator
DEFAULT_VAT_RATE_PERCENT: Final[float] = float(os.getenv('DEFAULT_VAT_RATE_PERCENT', '10'))
DEFAULT_ASSUMED_TAX_RATE_PERCENT: Final[float] = float(os.getenv('DEFAULT_ASSUMED_TAX_RATE_PERCENT', '8'))
