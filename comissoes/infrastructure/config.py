# comissoes/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    seed_dados_iniciais: bool
    cors_origins: tuple[str, ...]
    debug: bool


def _bool_env(nome: str, padrao: str) -> bool:
    return os.environ.get(nome, padrao).strip().lower() in {"1", "true", "yes", "sim"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = os.environ.get("CORS_ORIGINS", "http://localhost:5173")
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        seed_dados_iniciais=_bool_env("SEED_DADOS_INICIAIS", "true"),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        debug=_bool_env("API_DEBUG", "false"),
    )
