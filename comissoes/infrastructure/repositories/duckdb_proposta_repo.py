# comissoes/infrastructure/repositories/duckdb_proposta_repo.py
from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

import duckdb

from comissoes.domain.proposta.entities import DadosProposta, Proposta
from comissoes.domain.proposta.enums import CampoProposta
from comissoes.infrastructure.log import log

_COLUNAS = "id, proposta, valor_total, valor_pago, percent_comissao, valor_comissao_paga"

# Dados de demonstracao inseridos quando a tabela esta vazia.
PROPOSTAS_INICIAIS: tuple[DadosProposta, ...] = (
    DadosProposta("264.24 – Orlando", Decimal("24500"), Decimal("12250"), Decimal("10"), Decimal("1225")),
    DadosProposta("192.18 – Maria Alice", Decimal("18750"), Decimal("18750"), Decimal("12"), Decimal("2250")),
    DadosProposta("305.32 – Pedro Souza", Decimal("42800"), Decimal("21400"), Decimal("15"), Decimal("3210")),
    DadosProposta("178.09 – Alexandre Lima", Decimal("15300"), Decimal("0"), Decimal("8"), Decimal("0")),
)


class DuckDBPropostaRepo:
    """Recebe a conexao ou um cursor dela; a API passa um cursor por request."""

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar_todas(self) -> list[Proposta]:
        rows = self._conn.execute(f"SELECT {_COLUNAS} FROM propostas ORDER BY id").fetchall()  # noqa: S608
        return [self._hidratar(r) for r in rows]

    def obter_por_id(self, proposta_id: int) -> Proposta | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM propostas WHERE id = ?",  # noqa: S608
            [proposta_id],
        ).fetchone()
        return self._hidratar(row) if row else None

    def criar(self, dados: DadosProposta) -> Proposta:
        row = self._conn.execute(
            f"""
            INSERT INTO propostas (proposta, valor_total, valor_pago, percent_comissao, valor_comissao_paga)
            VALUES (?, ?, ?, ?, ?)
            RETURNING {_COLUNAS}
        """,  # noqa: S608
            [
                dados.proposta,
                dados.valor_total,
                dados.valor_pago,
                dados.percent_comissao,
                dados.valor_comissao_paga,
            ],
        ).fetchone()
        if row is None:  # pragma: no cover - INSERT ... RETURNING sempre devolve a linha
            raise RuntimeError("INSERT em propostas nao retornou linha")
        proposta = self._hidratar(row)
        log(f"Proposta {proposta.id} criada: {proposta.proposta!r}")
        return proposta

    def atualizar_campos(
        self,
        proposta_id: int,
        campos: Mapping[CampoProposta, object],
    ) -> Proposta | None:
        """UPDATE unico (atomico). Colunas vem do enum, nunca do input do usuario."""
        if not campos:
            raise ValueError("Atualizacao sem campos")

        sets = ", ".join(f"{campo.atributo} = ?" for campo in campos)
        params: list[object] = list(campos.values())
        params.append(proposta_id)
        row = self._conn.execute(
            f"UPDATE propostas SET {sets} WHERE id = ? RETURNING {_COLUNAS}",  # noqa: S608
            params,
        ).fetchone()
        if row is None:
            return None

        log(f"Proposta {proposta_id} atualizada: {', '.join(c.value for c in campos)}")
        return self._hidratar(row)

    def remover(self, proposta_id: int) -> bool:
        rows = self._conn.execute(
            "DELETE FROM propostas WHERE id = ? RETURNING id",
            [proposta_id],
        ).fetchall()
        if rows:
            log(f"Proposta {proposta_id} removida")
        return len(rows) > 0

    def contar(self) -> int:
        row = self._conn.execute("SELECT count(*) FROM propostas").fetchone()
        return int(row[0]) if row else 0

    def semear_dados_iniciais(self) -> int:
        """Insere as propostas de demonstracao se a tabela estiver vazia."""
        if self.contar() > 0:
            return 0
        for dados in PROPOSTAS_INICIAIS:
            self.criar(dados)
        log(f"{len(PROPOSTAS_INICIAIS)} propostas de demonstracao inseridas")
        return len(PROPOSTAS_INICIAIS)

    def _hidratar(self, row: tuple) -> Proposta:  # type: ignore[type-arg]
        return Proposta(
            id=int(row[0]),
            proposta=str(row[1]),
            valor_total=Decimal(str(row[2])),
            valor_pago=Decimal(str(row[3])),
            percent_comissao=Decimal(str(row[4])),
            valor_comissao_paga=Decimal(str(row[5])),
        )
