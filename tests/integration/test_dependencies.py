# tests/integration/test_dependencies.py
import duckdb
import pytest

from comissoes.infrastructure import duckdb_connection
from comissoes.interfaces.api.dependencies import get_proposta_service


def test_cursor_do_request_e_fechado_ao_final(test_db: duckdb.DuckDBPyConnection) -> None:
    duckdb_connection.set_connection(test_db)
    dependencia = get_proposta_service()
    service = next(dependencia)
    assert len(service.listar()) == 2

    dependencia.close()

    with pytest.raises(duckdb.Error):
        service.listar()
    # A conexao principal continua aberta
    assert test_db.execute("SELECT count(*) FROM propostas").fetchone() == (2,)
