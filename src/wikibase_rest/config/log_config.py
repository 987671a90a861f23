import logging


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging the same way for scripts and test sessions"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
        force=True
    )
