import logging
import os
from typing import List, TypedDict

from dotenv import load_dotenv

from classbank.logging_config.logging_config import setup_logging
from classbank.maintenance.service import ClassBankMaintenance
from classbank.messaging.telegram_handler import TelegramHandler
from classbank.sheets.client import GoogleSheetsClient


class AppConfig(TypedDict):
    """Configuration for the maintenance bot"""

    SPREADSHEET_ID: str
    GOOGLE_CREDENTIALS: str
    TELEGRAM_BOT_API_KEY: str
    ALLOWED_TELEGRAM_IDS: List[int]


def parse_user_ids(raw: str | None) -> List[int]:
    """Parse a comma-separated list of Telegram user IDs"""
    if not raw:
        return []
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError as e:
        raise ValueError(f"ALLOWED_TELEGRAM_IDS must be comma-separated integers, got {raw!r}") from e


def load_config(require_telegram: bool = True) -> AppConfig:
    """Load configuration from environment variables"""
    load_dotenv()

    required_vars = {
        "SPREADSHEET_ID": os.getenv("SPREADSHEET_ID"),
        "GOOGLE_CREDENTIALS": os.getenv("GOOGLE_CREDENTIALS"),
    }
    if require_telegram:
        required_vars["TELEGRAM_BOT_API_KEY"] = os.getenv("TELEGRAM_BOT_API_KEY")

    missing = [k for k, v in required_vars.items() if not v]
    if missing:
        raise OSError(f"Missing required environment variables: {', '.join(missing)}")

    return {
        "SPREADSHEET_ID": required_vars["SPREADSHEET_ID"],
        "GOOGLE_CREDENTIALS": required_vars["GOOGLE_CREDENTIALS"],
        "TELEGRAM_BOT_API_KEY": required_vars.get("TELEGRAM_BOT_API_KEY") or "",
        "ALLOWED_TELEGRAM_IDS": parse_user_ids(os.getenv("ALLOWED_TELEGRAM_IDS")),
    }


def build_maintenance(config: AppConfig) -> ClassBankMaintenance:
    sheets_client = GoogleSheetsClient(
        spreadsheet_id=config["SPREADSHEET_ID"],
        credentials_path=config["GOOGLE_CREDENTIALS"],
    )
    return ClassBankMaintenance(sheets_client)


# ruff: noqa: D103
def main() -> None:
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Starting ClassBank maintenance bot")

    config = load_config()
    if not config["ALLOWED_TELEGRAM_IDS"]:
        logger.warning("ALLOWED_TELEGRAM_IDS is empty, every maintenance command will be refused")

    telegram_handler = TelegramHandler(
        token=config["TELEGRAM_BOT_API_KEY"],
        maintenance=build_maintenance(config),
        allowed_user_ids=config["ALLOWED_TELEGRAM_IDS"],
    )

    logger.info("🤖 Starting Telegram bot...")
    telegram_handler.start_polling()


if __name__ == "__main__":
    main()
