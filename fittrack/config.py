from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional


class Settings:
    """Centralized configuration for the fitness tracking backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("FITTRACK_DATA_ROOT") or data_root_default
        ).expanduser()
        self.users_file: Path = Path(
            os.environ.get("FITTRACK_USERS_FILE") or (self.data_root / "users.json")
        ).expanduser()
        # No fallback secret: create_app() refuses to start when this is unset.
        self.jwt_secret: Optional[str] = os.environ.get("FITTRACK_JWT_SECRET") or None
        self.token_ttl_seconds: int = int(
            os.environ.get("FITTRACK_TOKEN_TTL_SECONDS") or "3600"
        )

        self.host: str = os.environ.get("FITTRACK_HOST") or os.environ.get("HOST") or "127.0.0.1"
        port_raw = os.environ.get("FITTRACK_PORT") or os.environ.get("PORT") or "5000"
        try:
            self.port: int = int(port_raw)
        except ValueError:
            self.port = 5000

        self.log_level: str = (os.environ.get("FITTRACK_LOG_LEVEL") or "INFO").upper()

        cors = os.environ.get("FITTRACK_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
