import logging
import sys

from whatsnew.config.config_manager import ConfigManager
from whatsnew.services.version_check_service import VersionCheckService
from whatsnew.utils.logging_utils import get_logger, log_exception

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)

logger = get_logger(__name__)

def main() -> int:
    """Log the current version and whether its release notes are due"""
    try:
        config = ConfigManager()
        config.load_configuration()

        service = VersionCheckService()
        logger.info(f"Current version: {service.current_version}")

        if service.should_present(config.last_seen_version):
            logger.info("Release notes should be presented")
        else:
            logger.info("Release notes are up to date")
        return 0

    except Exception as e:
        log_exception(logger, "Critical error during version check", e)
        raise

if __name__ == "__main__":
    sys.exit(main())
