# comissoes/application/dtos/proposta_dto.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, model_validator
from pydantic.alias_generators import to_camel

from comissoes.domain.proposta.entities import DadosProposta, PropostaComCalculos
from comissoes.domain.proposta.enums import CampoProposta

_CENTAVOS = Decimal("0.01")

# Limites das colunas DECIMAL(10, 2) e DECIMAL(5, 2), ja considerando o arredondamento do DuckDB
Dinheiro = Annotated[Decimal, Field(ge=0, le=Decimal("99999999.99"))]
Percentual = Annotated[Decimal, Field(ge=0, le=100)]
Rotulo = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def formatar_decimal(valor: Decimal) -> str:
    """Decimal serializado como string, 2 casas. Arredondamento so na borda."""
    return str(valor.quantize(_CENTAVOS, rounding=ROUND_HALF_UP))


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NovaPropostaDTO(CamelModel):
    """Payload de criacao. Os cinco campos sao obrigatorios."""

    proposta: Rotulo
    valor_total: Dinheiro
    valor_pago: Dinheiro
    percent_comissao: Percentual
    valor_comissao_paga: Dinheiro

    def to_domain(self) -> DadosProposta:
        return DadosProposta.validados(
            proposta=self.proposta,
            valor_total=self.valor_total,
            valor_pago=self.valor_pago,
            percent_comissao=self.percent_comissao,
            valor_comissao_paga=self.valor_comissao_paga,
        )


class AtualizacaoPropostaDTO(CamelModel):
    """Payload parcial. Pelo menos um campo."""

    proposta: Rotulo | None = None
    valor_total: Dinheiro | None = None
    valor_pago: Dinheiro | None = None
    percent_comissao: Percentual | None = None
    valor_comissao_paga: Dinheiro | None = None

    @model_validator(mode="after")
    def pelo_menos_um_campo(self) -> AtualizacaoPropostaDTO:
        if not self.campos():
            raise ValueError("Informe pelo menos um campo para atualizar")
        return self

    def campos(self) -> dict[CampoProposta, object]:
        return {
            campo: getattr(self, campo.atributo)
            for campo in CampoProposta
            if getattr(self, campo.atributo) is not None
        }


class PropostaDTO(CamelModel):
    id: int
    proposta: str
    valor_total: str  # Decimal serializado como string
    valor_pago: str
    percent_comissao: str
    valor_comissao_paga: str
    saldo_aberto: str
    valor_comissao_total: str
    percent_comissao_paga: str

    @classmethod
    def from_domain(cls, registro: PropostaComCalculos) -> PropostaDTO:
        p, d = registro.proposta, registro.derivados
        return cls(
            id=p.id,
            proposta=p.proposta,
            valor_total=formatar_decimal(p.valor_total),
            valor_pago=formatar_decimal(p.valor_pago),
            percent_comissao=formatar_decimal(p.percent_comissao),
            valor_comissao_paga=formatar_decimal(p.valor_comissao_paga),
            saldo_aberto=formatar_decimal(d.saldo_aberto),
            valor_comissao_total=formatar_decimal(d.valor_comissao_total),
            percent_comissao_paga=formatar_decimal(d.percent_comissao_paga),
        )
