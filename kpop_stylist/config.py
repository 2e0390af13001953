"""
Configuration module for the K-Pop Stylist API
Contains logger setup and environment-driven settings
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


# -------------------------
# Logger Setup
# -------------------------
def setup_logger(
    name: str = __name__, log_file: Optional[str] = "kpop_stylist.log"
) -> logging.Logger:
    """
    Set up and return a logger with console and (optionally) file handlers

    Args:
        name: Logger name (usually __name__)
        log_file: Path to log file, or None/"" to log to the console only

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    # Avoid adding duplicate handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


# Create the main application logger
logger = setup_logger("kpop_stylist", os.getenv("LOG_FILE", "kpop_stylist.log"))


# -------------------------
# Settings
# -------------------------
DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"
DEFAULT_REPORT_PROMPT_ID = "pmpt_69746eac15448194bb554248a6918b2202f145b5e23338b6"
DEFAULT_REPORT_PROMPT_VERSION = "3"
DEFAULT_IMAGE_MODEL = "gpt-image-1"
DEFAULT_IMAGE_SIZE = "1024x1024"
DEFAULT_TIMEOUT_SECONDS = 120.0


@dataclass(frozen=True)
class Settings:
    """Runtime configuration injected into the application."""

    openai_api_key: Optional[str] = None
    openai_base_url: str = DEFAULT_OPENAI_BASE_URL
    report_prompt_id: str = DEFAULT_REPORT_PROMPT_ID
    report_prompt_version: str = DEFAULT_REPORT_PROMPT_VERSION
    image_model: str = DEFAULT_IMAGE_MODEL
    image_size: str = DEFAULT_IMAGE_SIZE
    request_timeout: float = DEFAULT_TIMEOUT_SECONDS
    static_dir: Optional[str] = "dist"
    server_host: str = "0.0.0.0"
    server_port: int = 9002

    @property
    def responses_url(self) -> str:
        return f"{self.openai_base_url.rstrip('/')}/responses"

    @property
    def image_edits_url(self) -> str:
        return f"{self.openai_base_url.rstrip('/')}/images/edits"


def load_settings() -> Settings:
    """Build a Settings value from the current environment."""

    settings = Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_base_url=os.getenv("OPENAI_BASE_URL", DEFAULT_OPENAI_BASE_URL),
        report_prompt_id=os.getenv(
            "OPENAI_REPORT_PROMPT_ID", DEFAULT_REPORT_PROMPT_ID
        ),
        report_prompt_version=os.getenv(
            "OPENAI_REPORT_PROMPT_VERSION", DEFAULT_REPORT_PROMPT_VERSION
        ),
        image_model=os.getenv("OPENAI_IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
        image_size=os.getenv("OPENAI_IMAGE_SIZE", DEFAULT_IMAGE_SIZE),
        request_timeout=float(
            os.getenv("OPENAI_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        ),
        static_dir=os.getenv("STATIC_DIR", "dist") or None,
        server_host=os.getenv("SERVER_HOST", "0.0.0.0"),
        server_port=int(os.getenv("SERVER_PORT", "9002")),
    )

    # Log configuration status
    logger.info("Configuration loaded successfully")
    logger.debug(f"OPENAI_API_KEY configured: {bool(settings.openai_api_key)}")
    logger.debug(f"OPENAI_BASE_URL: {settings.openai_base_url}")
    logger.debug(f"STATIC_DIR: {settings.static_dir}")

    return settings
