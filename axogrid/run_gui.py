import logging
import os
import sys
import traceback
import warnings
from datetime import datetime

from PySide6.QtWidgets import QApplication, QMessageBox

from axogrid.utils.settings import settings
from axogrid.widgets.main_window import MainWindow

CRASH_LOG_PATH = os.path.abspath('axogrid_crash.log')


def _append_crash_log(exc_info):
    ts = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    with open(CRASH_LOG_PATH, 'a', encoding='utf-8') as f:
        f.write(f"[{ts}] unhandled exception\n")
        f.writelines(traceback.format_exception(*exc_info))
    print(f"[CRASH] Details written to: {CRASH_LOG_PATH}")


def install_crash_handlers():
    def _unhandled_exception(exc_type, exc_value, exc_traceback):
        _append_crash_log((exc_type, exc_value, exc_traceback))
        sys.__excepthook__(exc_type, exc_value, exc_traceback)

    sys.excepthook = _unhandled_exception


def suppress_warnings():
    """Suppress all warnings when not in a development environment."""
    environment = os.getenv('AXOGRID_ENVIRONMENT')
    if environment == 'development':
        print('Running in development environment.')
        logging.basicConfig(level=logging.DEBUG)
        return
    logging.basicConfig(level=logging.ERROR)
    warnings.simplefilter('ignore')


def run_gui():
    app = QApplication([])
    # The application name is shown in the taskbar.
    app.setApplicationName('axogrid')
    # The application display name is shown in the title bar.
    app.setApplicationDisplayName('Axonometric Grid')
    app.setStyle('Fusion')

    main_window = MainWindow(app)
    geometry = settings.value('geometry')
    if geometry is not None:
        main_window.restoreGeometry(geometry)
    main_window.show()
    return int(app.exec())


if __name__ == '__main__':
    suppress_warnings()
    install_crash_handlers()
    try:
        sys.exit(run_gui())
    except Exception as exception:
        _append_crash_log(sys.exc_info())
        error_message_box = QMessageBox()
        error_message_box.setWindowTitle('Error')
        error_message_box.setIcon(QMessageBox.Icon.Critical)
        error_message_box.setText(str(exception))
        error_message_box.setDetailedText(traceback.format_exc())
        error_message_box.exec()
        sys.exit(1)
