import logging


def setup_logging(level="INFO"):
    """Set up logging configuration."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
        handlers=[logging.StreamHandler()],
        force=True  # uvicorn installs its own handlers first
    )

    logger = logging.getLogger('r2gallery')
    logger.setLevel(level)
    return logger
