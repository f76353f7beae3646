# comissoes/application/dtos/totais_dto.py
from __future__ import annotations

from comissoes.domain.proposta.entities import TotaisPropostas

from .proposta_dto import CamelModel, formatar_decimal


class FatiaGraficoDTO(CamelModel):
    rotulo: str
    valor: str


class GraficoDTO(CamelModel):
    """Dados de um grafico de rosca: fatias + percentual central."""

    titulo: str
    percentual: str
    fatias: list[FatiaGraficoDTO]


class TotaisDTO(CamelModel):
    quantidade: int
    valor_total: str
    valor_pago: str
    saldo_aberto: str
    valor_comissao_total: str
    valor_comissao_paga: str
    percent_recebido: str
    percent_comissao_paga: str
    graficos: list[GraficoDTO]

    @classmethod
    def from_domain(cls, totais: TotaisPropostas) -> TotaisDTO:
        pagamento = GraficoDTO(
            titulo="Pagamentos",
            percentual=formatar_decimal(totais.percent_recebido),
            fatias=[
                FatiaGraficoDTO(rotulo="Recebido", valor=formatar_decimal(totais.valor_pago)),
                FatiaGraficoDTO(rotulo="A Receber", valor=formatar_decimal(totais.saldo_aberto)),
            ],
        )
        comissao = GraficoDTO(
            titulo="Comissoes",
            percentual=formatar_decimal(totais.percent_comissao_paga),
            fatias=[
                FatiaGraficoDTO(rotulo="Paga", valor=formatar_decimal(totais.valor_comissao_paga)),
                FatiaGraficoDTO(rotulo="A Pagar", valor=formatar_decimal(totais.comissao_a_pagar)),
            ],
        )
        return cls(
            quantidade=totais.quantidade,
            valor_total=formatar_decimal(totais.valor_total),
            valor_pago=formatar_decimal(totais.valor_pago),
            saldo_aberto=formatar_decimal(totais.saldo_aberto),
            valor_comissao_total=formatar_decimal(totais.valor_comissao_total),
            valor_comissao_paga=formatar_decimal(totais.valor_comissao_paga),
            percent_recebido=formatar_decimal(totais.percent_recebido),
            percent_comissao_paga=formatar_decimal(totais.percent_comissao_paga),
            graficos=[pagamento, comissao],
        )
