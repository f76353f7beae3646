# comissoes/interfaces/api/dependencies.py
from collections.abc import Generator

from comissoes.application.services.export_service import ExportService
from comissoes.application.services.proposta_service import PropostaService
from comissoes.infrastructure.duckdb_connection import get_connection
from comissoes.infrastructure.repositories.duckdb_proposta_repo import DuckDBPropostaRepo


def get_proposta_service() -> Generator[PropostaService, None, None]:
    # cursor() = conexao duplicada sobre o mesmo banco, fechada ao fim do request
    cursor = get_connection().cursor()
    try:
        yield PropostaService(repo=DuckDBPropostaRepo(cursor))
    finally:
        cursor.close()


def get_export_service() -> ExportService:
    return ExportService()
