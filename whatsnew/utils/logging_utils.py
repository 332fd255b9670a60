import logging
from typing import Optional

def get_logger(module_name: str) -> logging.Logger:
    """
    Get a standardized logger for the specified module.
    
    Args:
        module_name: The name of the module requesting the logger
        
    Returns:
        Logger instance under the module's dotted name
    """
    return logging.getLogger(module_name)

def log_exception(logger: logging.Logger, message: str, exception: Optional[Exception] = None) -> None:
    """
    Log an exception with a consistent format.
    
    Args:
        logger: The logger to use
        message: The error message
        exception: The exception object, if available
    """
    if exception:
        logger.error(f"{message}: {exception}")
        logger.exception(exception)
    else:
        logger.error(message)

def log_version_resolution(logger: logging.Logger, source: str, short_version: Optional[str],
                           build_number: Optional[str], resolved: object) -> None:
    """
    Log how a version was resolved from host metadata, for debugging purposes.
    
    Args:
        logger: The logger to use
        source: Name of the metadata source that was read
        short_version: Raw short version string, if any
        build_number: Raw build number, if any
        resolved: The resulting version
    """
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"Resolved version {resolved} from {source} "
            f"(short_version={short_version!r}, build_number={build_number!r})"
        )
