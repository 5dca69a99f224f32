"""GUI entry point for the LabelMaker desktop application."""

import logging

from labelmaker import __version__
from labelmaker.config import get_settings

logger = logging.getLogger(__name__)


def _setup_logging():
    """Set up logging for the GUI application."""
    logging.basicConfig(
        level=getattr(logging, get_settings().log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def main():
    """Main entry point for the LabelMaker GUI application.

    Opens the main window. The settings dialog is shown on top of it
    when no endpoint or token has been configured yet.
    """
    _setup_logging()
    logger.info(f"LabelMaker GUI v{__version__} starting")

    # Import here to allow GUI-less usage
    from labelmaker.gui.window import LabelMakerWindow
    from labelmaker.service import get_print_service

    window = LabelMakerWindow(get_print_service())
    window.show()

    logger.info("LabelMaker GUI exiting")


if __name__ == "__main__":
    main()
