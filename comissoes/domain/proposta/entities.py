# comissoes/domain/proposta/entities.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .value_objects import PercentualComissao, RotuloProposta, ValorMonetario


@dataclass(frozen=True)
class DadosProposta:
    """Os cinco campos informados na criacao. Todos obrigatorios, sem defaults."""

    proposta: str
    valor_total: Decimal
    valor_pago: Decimal
    percent_comissao: Decimal
    valor_comissao_paga: Decimal

    @classmethod
    def validados(
        cls,
        proposta: str,
        valor_total: Decimal,
        valor_pago: Decimal,
        percent_comissao: Decimal,
        valor_comissao_paga: Decimal,
    ) -> DadosProposta:
        """Passa cada campo pelo value object correspondente. ValueError se invalido."""
        return cls(
            proposta=RotuloProposta(proposta).valor,
            valor_total=ValorMonetario(valor_total).valor,
            valor_pago=ValorMonetario(valor_pago).valor,
            percent_comissao=PercentualComissao(percent_comissao).valor,
            valor_comissao_paga=ValorMonetario(valor_comissao_paga).valor,
        )


@dataclass(frozen=True)
class Proposta:
    """Registro persistido. `id` atribuido pelo repositorio, imutavel."""

    id: int
    proposta: str
    valor_total: Decimal
    valor_pago: Decimal
    percent_comissao: Decimal
    valor_comissao_paga: Decimal


@dataclass(frozen=True)
class CamposDerivados:
    """Nunca persistidos. Podem ser negativos ou passar de 100 (sem clamp)."""

    saldo_aberto: Decimal
    valor_comissao_total: Decimal
    percent_comissao_paga: Decimal


@dataclass(frozen=True)
class PropostaComCalculos:
    proposta: Proposta
    derivados: CamposDerivados

    @property
    def id(self) -> int:
        return self.proposta.id


@dataclass(frozen=True)
class TotaisPropostas:
    """Somatorio para rodape da tabela e graficos."""

    quantidade: int
    valor_total: Decimal
    valor_pago: Decimal
    saldo_aberto: Decimal
    valor_comissao_total: Decimal
    valor_comissao_paga: Decimal
    percent_recebido: Decimal
    percent_comissao_paga: Decimal

    @property
    def comissao_a_pagar(self) -> Decimal:
        return self.valor_comissao_total - self.valor_comissao_paga
