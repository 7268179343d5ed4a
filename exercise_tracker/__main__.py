"""Run the API with uvicorn: ``python -m exercise_tracker``.

Host and port come from settings (HOST / PORT, default 0.0.0.0:3000).
"""

import uvicorn

from exercise_tracker.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "exercise_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
