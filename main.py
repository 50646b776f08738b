import logging
import sys

from PyQt5.QtWidgets import QApplication

from polyfill.config import AppConfig
from polyfill.widgets import MainWindow


def main():
    config = AppConfig.from_env()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    win = MainWindow(config)
    win.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
