from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Only install our handler once (reload / repeated create_app in tests)
    if any(getattr(h, "_complaint_assistant", False) for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._complaint_assistant = True  # type: ignore[attr-defined]
    root.addHandler(handler)
