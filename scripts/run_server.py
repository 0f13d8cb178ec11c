#!/usr/bin/env python3
"""
Start the storeops API under uvicorn.

Usage:
  python scripts/run_server.py [--host 0.0.0.0] [--port 4000] [--reload]

HOST/PORT default to the environment (PORT falls back to 4000).
"""
from __future__ import annotations

import argparse

import uvicorn

from storeops.core.config import get_settings


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Run the storeops API")
    ap.add_argument("--host", default=settings.host, help=f"bind address (default: {settings.host})")
    ap.add_argument("--port", type=int, default=settings.port, help=f"port (default: {settings.port})")
    ap.add_argument("--reload", action="store_true", help="restart on code changes")
    args = ap.parse_args()

    print(f"Storeops API listening on http://{args.host}:{args.port} (data: {settings.data_dir})")
    uvicorn.run(
        "storeops.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
