"""
Configuration settings for the TubeTrans application.
"""

import os
from typing import Dict, Any
from dotenv import load_dotenv

from tubetrans.utils.logger import logging


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "TubeTrans"
    APP_VERSION = "0.2.0"

    # API keys (API_KEY is the name older deployments used)
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")

    # Default models
    DEFAULT_MODEL = os.getenv("GEMINI_MODEL", "gemini-3-flash-preview")
    TRANSLATION_TEMPERATURE = 0.7
    TARGET_LANGUAGE = "Bangla"

    DEBUG = False
    LOG_LEVEL = "INFO"

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        logging.setLevel(cls.LOG_LEVEL)

        # The key is not enforced here, requests fail at the backend instead
        if not cls.GEMINI_API_KEY:
            logging.warning("GEMINI_API_KEY environment variable not set.")
            logging.warning("Please set it in the .env file or environment variables.")

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Get the non-secret settings, for diagnostics."""
        return {
            "app_name": cls.APP_NAME,
            "app_version": cls.APP_VERSION,
            "model": cls.DEFAULT_MODEL,
            "translation_temperature": cls.TRANSLATION_TEMPERATURE,
            "api_key_set": bool(cls.GEMINI_API_KEY),
            "debug": cls.DEBUG,
        }


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
