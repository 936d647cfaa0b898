#!/usr/bin/env python3
"""Run the ahbets API under uvicorn.

Usage:
    python serve.py                          # 127.0.0.1:8080
    python serve.py --host 0.0.0.0 --port 80
    python serve.py --reload --log-level debug
"""

from __future__ import annotations

import argparse
import os

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="ahbets hospital/department REST API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true", help="restart on code changes (dev only)")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="overrides AHBETS_LOG_LEVEL",
    )
    args = parser.parse_args()

    if args.log_level:
        os.environ["AHBETS_LOG_LEVEL"] = args.log_level

    uvicorn.run(
        "ahbets.api:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
