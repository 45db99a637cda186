from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import sys
import os

ORG_ID = "revolutionviewer"
APP_ID = "revolution-viewer"
ORG_DOMAIN = "revolutionviewer.local"

VISIBLE_APP_NAME = "Solids of Revolution"


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (reuses a running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv if argv is None else argv)

    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    return app
