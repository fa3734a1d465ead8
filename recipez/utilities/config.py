"""Configuration management for the Recip-EZ application."""
import os
from typing import Final, List
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
BASE_DIR: Final[Path] = Path(__file__).parent.parent.parent
env_path = BASE_DIR / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '3000'))
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()
CORS_ORIGINS: Final[List[str]] = [
    o.strip() for o in os.getenv('CORS_ORIGINS', '*').split(',') if o.strip()
]

# File Paths
DATA_DIR: Final[Path] = Path(os.getenv('RECIPEZ_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
