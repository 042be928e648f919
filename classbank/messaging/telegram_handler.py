import logging
from typing import Awaitable, Callable, Iterable, NamedTuple

from telegram import BotCommand, Update
from telegram.ext import Application, CommandHandler, ContextTypes

from classbank.maintenance.service import ClassBankMaintenance


logger = logging.getLogger(__name__)


class MenuItem(NamedTuple):
    command: str
    label: str
    operation: str


MENU_ITEMS = (
    MenuItem("verify", "🔍 Verify sheet structure", "verify_structure"),
    MenuItem("report", "📊 Data summary", "report_data"),
    MenuItem("provision", "🛠 Create missing sheets", "create_missing_sheets"),
)

# Available to admins but not shown in the command menu
SCANNER_COMMAND = MenuItem("mixed", "🔎 Check Transactions for mixed data", "check_mixed_data")


class TelegramHandler:
    """Exposes the ClassBank maintenance operations as a Telegram bot menu"""

    def __init__(
        self,
        token: str,
        maintenance: ClassBankMaintenance,
        allowed_user_ids: Iterable[int] = (),
    ) -> None:
        """Initialize the Telegram handler

        Args:
            token: Telegram bot token
            maintenance: ClassBankMaintenance instance the menu items run against
            allowed_user_ids: Telegram user IDs allowed to run operations

        """
        self.token = token
        self.maintenance = maintenance
        self.allowed_user_ids = frozenset(allowed_user_ids)
        self.application = Application.builder().token(token).post_init(self.install_menu).build()

    async def install_menu(self, application: Application) -> None:
        """Install the command menu once the bot has started"""
        await application.bot.set_my_commands(
            [BotCommand(item.command, item.label) for item in MENU_ITEMS]
        )
        logger.info(f"Installed ClassBank menu with {len(MENU_ITEMS)} items")

    async def start(self, update: Update, _context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle the /start and /help commands"""
        if not self._is_user_allowed(update):
            await update.message.reply_text("❌ You are not allowed to maintain this ClassBank.")
            return

        menu = "\n".join(f"/{item.command} - {item.label}" for item in MENU_ITEMS)
        await update.message.reply_text(f"🏦 ClassBank maintenance\n\n{menu}")

    def make_operation_callback(
        self, item: MenuItem
    ) -> Callable[[Update, ContextTypes.DEFAULT_TYPE], Awaitable[None]]:
        """Bind a menu item to the maintenance operation it names"""
        operation = getattr(self.maintenance, item.operation)

        async def callback(update: Update, _context: ContextTypes.DEFAULT_TYPE) -> None:
            if not self._is_user_allowed(update):
                await update.message.reply_text("❌ You are not allowed to maintain this ClassBank.")
                return

            logger.info(f"User {update.effective_user.id} ran /{item.command}")
            try:
                report = operation()
            except Exception:
                logger.exception(f"Error running {item.operation}")
                await update.message.reply_text("❌ Sorry, that operation failed. Check the logs for details.")
                return
            await update.message.reply_text(report)

        return callback

    def _is_user_allowed(self, update: Update) -> bool:
        """Check if the user is allowed to run maintenance operations"""
        return update.effective_user.id in self.allowed_user_ids

    def register_handlers(self) -> None:
        self.application.add_handler(CommandHandler(["start", "help"], self.start))
        for item in (*MENU_ITEMS, SCANNER_COMMAND):
            self.application.add_handler(CommandHandler(item.command, self.make_operation_callback(item)))

    def start_polling(self) -> None:
        """Start the bot polling for messages"""
        self.register_handlers()
        logger.info("Handlers registered, starting polling...")
        self.application.run_polling()
