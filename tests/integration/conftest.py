# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import duckdb
import pytest
from fastapi.testclient import TestClient

# Sem dados de demonstracao em testes: cada teste controla o que insere
os.environ["SEED_DADOS_INICIAIS"] = "false"


@pytest.fixture()
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory novo por teste, com schema e duas propostas deterministicas."""
    from comissoes.infrastructure.duckdb_connection import inicializar_schema

    conn = duckdb.connect(":memory:")
    inicializar_schema(conn)
    conn.execute("""
        INSERT INTO propostas (proposta, valor_total, valor_pago, percent_comissao, valor_comissao_paga) VALUES
        ('264.24 – Orlando', 24500.00, 12250.00, 10.00, 1225.00),
        ('178.09 – Alexandre Lima', 15300.00, 0.00, 8.00, 0.00)
    """)
    yield conn
    conn.close()


@pytest.fixture()
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory injetado."""
    from comissoes.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    from comissoes.infrastructure.config import get_settings
    get_settings.cache_clear()

    from comissoes.interfaces.api.main import app
    with TestClient(app) as c:
        yield c
