from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class AuthConfig:
    secret_key: str = os.getenv("ACCESS_TOKEN_SECRET", "")
    token_ttl_seconds: int = int(os.getenv("LOCAIS_TOKEN_TTL_SECONDS", "3600"))
    bcrypt_rounds: int = int(os.getenv("LOCAIS_BCRYPT_ROUNDS", "10"))
    token_salt: str = "locais-auth"


DEFAULT_AUTH_CONFIG = AuthConfig()
