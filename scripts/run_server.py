import argparse

import uvicorn

from catalog.config import get_settings


def parse_args():
    parser = argparse.ArgumentParser(description="Run the product catalog API.")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes.")
    return parser.parse_args()


def main():
    args = parse_args()
    settings = get_settings()
    uvicorn.run(
        "catalog.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
