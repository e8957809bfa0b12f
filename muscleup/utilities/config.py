"""Configuration management for the MuscleUp report service."""
import os
from typing import Final, Optional
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
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Text extraction service (PDF -> plain text)
EXTRACTION_SERVICE_URL: Final[str] = os.getenv('EXTRACTION_SERVICE_URL', 'http://localhost:8100/extract')
EXTRACTION_API_KEY: Final[Optional[str]] = os.getenv('EXTRACTION_API_KEY') or None
EXTRACTION_TIMEOUT: Final[float] = float(os.getenv('EXTRACTION_TIMEOUT', '30'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
STATIC_DIR: Final[Path] = BASE_DIR / 'static'
# Brand logo for the report header; the bundled file is a placeholder
LOGO_PATH: Final[Path] = Path(os.getenv('LOGO_PATH', str(STATIC_DIR / 'logo.png')))
