"""Run the API with uvicorn.

Usage:
    python -m forum_service.main
"""

from __future__ import annotations

import uvicorn

from forum_service.core.settings import get_app_settings


def main() -> None:
    settings = get_app_settings()
    uvicorn.run(
        "forum_service.app.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,
    )


if __name__ == "__main__":
    main()
