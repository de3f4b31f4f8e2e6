from __future__ import annotations

import argparse

import uvicorn

from .app import get_app
from .observability import configure_logging
from .settings import get_settings


def main(argv=None) -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Serve the grocery list API")
    parser.add_argument("--host", default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    args = parser.parse_args(argv)

    settings = settings.model_copy(update={"HOST": args.host, "PORT": args.port, "LOG_LEVEL": args.log_level})
    configure_logging(settings.LOG_LEVEL)
    app = get_app(settings=settings)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
