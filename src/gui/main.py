"""
Main entry point for the Student Registration application.
"""

import sys

from PySide6.QtWidgets import QApplication

from core.config import setup_qsettings
from core.config_manager import ConfigManager
from core.error_handler import init_logging, setup_error_handling
from gui.main_window import MainWindow


def main() -> int:
    """Main application entry point."""
    setup_qsettings()
    app = QApplication(sys.argv)

    config_manager = ConfigManager()
    init_logging(config_manager.get("log_level"))
    setup_error_handling()

    window = MainWindow(config_manager=config_manager)
    window.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
