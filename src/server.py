"""uvicorn runner for the Shopfront API.

Usage:
    python src/server.py                     # host/port from shopfront.toml
    python src/server.py --port 4000         # override the port
    python src/server.py --env production    # pick a config environment
"""

import argparse
import os

import uvicorn


def main():
    parser = argparse.ArgumentParser(description="Shopfront API server")
    parser.add_argument("--env", help="Config environment (overrides SHOPFRONT_ENV)")
    parser.add_argument("--host", help="Bind address (default: from config)")
    parser.add_argument("--port", type=int, help="Bind port (default: from config)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    if args.env:
        os.environ["SHOPFRONT_ENV"] = args.env

    from shared.config import load_config

    config = load_config()
    uvicorn.run(
        "app:app",
        host=args.host or config.host,
        port=args.port or config.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
