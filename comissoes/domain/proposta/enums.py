# comissoes/domain/proposta/enums.py
from __future__ import annotations

from enum import Enum


class CampoProposta(str, Enum):
    """Campos persistidos de uma proposta. Valor = nome no JSON (camelCase)."""

    PROPOSTA = "proposta"
    VALOR_TOTAL = "valorTotal"
    VALOR_PAGO = "valorPago"
    PERCENT_COMISSAO = "percentComissao"
    VALOR_COMISSAO_PAGA = "valorComissaoPaga"

    @property
    def atributo(self) -> str:
        """Nome do atributo na entidade e da coluna em `propostas`."""
        return _ATRIBUTOS[self]

    @property
    def numerico(self) -> bool:
        return self is not CampoProposta.PROPOSTA


_ATRIBUTOS: dict[CampoProposta, str] = {
    CampoProposta.PROPOSTA: "proposta",
    CampoProposta.VALOR_TOTAL: "valor_total",
    CampoProposta.VALOR_PAGO: "valor_pago",
    CampoProposta.PERCENT_COMISSAO: "percent_comissao",
    CampoProposta.VALOR_COMISSAO_PAGA: "valor_comissao_paga",
}
