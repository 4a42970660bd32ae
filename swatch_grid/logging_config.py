import logging


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure logging for a swatch viewer host.

    Args:
        debug: If True, set log level to DEBUG, otherwise INFO
    """
    package_logger = logging.getLogger("swatch_grid")
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Streamlit reruns the script on every interaction; add the handler once
    if not package_logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        package_logger.addHandler(console_handler)

    logging.getLogger("PIL").setLevel(logging.WARNING)

    return package_logger
