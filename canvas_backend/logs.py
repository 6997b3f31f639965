import logging


def configure_logging(level: str = "info") -> None:
    """Root logger setup; a no-op once the root logger has handlers."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
