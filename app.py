import signal
import sys

from dotenv import load_dotenv
from rich.console import Console

from employee_tracker.database import DatabaseManager
from employee_tracker.logging_setup import setup_logging, get_logger
from employee_tracker.menu import MainMenu
from employee_tracker.postgresql_pool import PostgreSQLConnectionPool
from employee_tracker.prompts import ConsolePrompter
from employee_tracker.settings import DatabaseSettings
from employee_tracker.tracker import EmployeeTracker

logger = get_logger(__name__)


def signal_handler(sig, frame):
    """Handle termination signals."""
    logger.warning("Received signal %s", sig)
    sys.exit(0)


def build_menu(pool: PostgreSQLConnectionPool, console: Console) -> MainMenu:
    prompter = ConsolePrompter(console)
    tracker = EmployeeTracker(DatabaseManager(pool), prompter, console)
    return MainMenu(tracker, prompter, console)


def main() -> None:
    # Load environment variables from .env file
    load_dotenv()
    setup_logging()

    signal.signal(signal.SIGTERM, signal_handler)

    try:
        settings = DatabaseSettings.from_env()
    except ValueError as e:
        logger.error("Invalid database settings: %s", e)
        sys.exit(1)

    pool = PostgreSQLConnectionPool(settings)
    pool.connect()

    console = Console()
    menu = build_menu(pool, console)

    logger.info("Employee tracker started")
    try:
        menu.run()
    except (KeyboardInterrupt, EOFError):
        console.print("\nExiting...")
        sys.exit(0)
    finally:
        pool.log_pool_stats()
        pool.close()


if __name__ == '__main__':
    main()
