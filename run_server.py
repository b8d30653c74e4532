"""Entry point for running the FastAPI application with Uvicorn."""
from __future__ import annotations

import os

import uvicorn

from social_api.config import get_settings


def main() -> None:
  settings = get_settings()
  reload = os.getenv("UVICORN_RELOAD", "false").lower() == "true"
  uvicorn.run("social_api.main:app", host="0.0.0.0", port=settings.server_port, reload=reload)


if __name__ == "__main__":
  main()
