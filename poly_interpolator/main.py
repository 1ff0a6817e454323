from __future__ import annotations

import logging
import sys
from typing import Optional

from .session import InterpolationSession
from .settings import InterpolationSettings


def main(settings: Optional[InterpolationSettings] = None) -> None:
    settings = settings if settings is not None else InterpolationSettings()
    logging.basicConfig(
        level=settings.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Qt is only needed for the window; the engine stays importable without it
    from PySide6.QtWidgets import QApplication

    from .app import InterpolationWindow

    app = QApplication(sys.argv)
    window = InterpolationWindow(InterpolationSession(settings))
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
