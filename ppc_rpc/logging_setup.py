import coloredlogs, logging


def setup_logging(log_level="INFO"):
    """
    Setup logging with specified level.

    Args:
        log_level: Log level as string ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
                  or boolean (True=DEBUG, False=INFO)

    Returns:
        Logger instance configured with coloredlogs
    """
    if isinstance(log_level, bool):
        log_level = "DEBUG" if log_level else "INFO"

    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    log_level = str(log_level).upper()
    if log_level not in valid_levels:
        print(
            f"Invalid log level '{log_level}'. Using 'INFO'. Valid levels: {valid_levels}"
        )
        log_level = "INFO"

    level_const = getattr(logging, log_level)

    # Configure root logger first (affects all child loggers)
    root_logger = logging.getLogger()
    root_logger.setLevel(level_const)
    coloredlogs.install(level=log_level, milliseconds=True)

    logger = logging.getLogger("ppc_rpc")
    logger.setLevel(level_const)

    # Keep transport libraries quiet unless something is wrong
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.INFO)

    return logger
