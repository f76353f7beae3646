# comissoes/application/services/derivacao_service.py
"""Campos derivados de propostas. Funcoes puras, zero IO, zero estado.

ADR: uma unica implementacao das formulas, chamada tanto pelo caminho de
leitura do servidor quanto pela edicao otimista do painel.
Nenhum campo derivado entra na formula de outro.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from decimal import Decimal

from comissoes.domain.proposta.entities import (
    CamposDerivados,
    Proposta,
    PropostaComCalculos,
    TotaisPropostas,
)
from comissoes.domain.proposta.enums import CampoProposta
from comissoes.domain.proposta.errors import ValorEdicaoInvalidoError
from comissoes.domain.proposta.value_objects import (
    PercentualComissao,
    RotuloProposta,
    ValorMonetario,
    para_decimal,
)

_ZERO = Decimal("0")
_CEM = Decimal("100")


def _percentual(parte: Decimal, todo: Decimal) -> Decimal:
    """Zero-guard: denominador <= 0 devolve 0 sem dividir."""
    if todo > _ZERO:
        return parte / todo * _CEM
    return _ZERO


def derivar_campos(proposta: Proposta) -> CamposDerivados:
    """Mesma entrada = mesma saida. Nunca levanta excecao para Decimals finitos."""
    valor_comissao_total = proposta.valor_total * (proposta.percent_comissao / _CEM)
    return CamposDerivados(
        saldo_aberto=proposta.valor_total - proposta.valor_pago,
        valor_comissao_total=valor_comissao_total,
        percent_comissao_paga=_percentual(proposta.valor_comissao_paga, valor_comissao_total),
    )


def com_calculos(proposta: Proposta) -> PropostaComCalculos:
    return PropostaComCalculos(proposta=proposta, derivados=derivar_campos(proposta))


def validar_valor(campo: CampoProposta, novo_valor: object) -> object:
    """Normaliza o valor de uma edicao. ValorEdicaoInvalidoError se rejeitado."""
    try:
        if not campo.numerico:
            return RotuloProposta(novo_valor).valor  # type: ignore[arg-type]
        valor = para_decimal(novo_valor)
        if campo is CampoProposta.PERCENT_COMISSAO:
            return PercentualComissao(valor).valor
        return ValorMonetario(valor).valor
    except ValueError as err:
        raise ValorEdicaoInvalidoError(campo, novo_valor, str(err)) from err


def reconciliar_edicao(
    registro: PropostaComCalculos,
    campo: CampoProposta,
    novo_valor: object,
) -> PropostaComCalculos:
    """Edicao otimista de um unico campo.

    Valida, aplica sobre uma copia e rederiva os tres campos, mesmo quando o
    campo alterado nao participa de nenhuma formula (ex.: o rotulo). O
    resultado e provisorio: a resposta do repositorio sempre prevalece.

    Raises:
        ValorEdicaoInvalidoError: valor rejeitado; `registro` nao e alterado.
    """
    valor = validar_valor(campo, novo_valor)
    atualizada = dataclasses.replace(registro.proposta, **{campo.atributo: valor})
    return com_calculos(atualizada)


def agregar(registros: Iterable[PropostaComCalculos]) -> TotaisPropostas:
    """Soma simples, sem arredondamento por registro. Independe da ordem."""
    quantidade = 0
    valor_total = valor_pago = saldo_aberto = _ZERO
    comissao_total = comissao_paga = _ZERO
    for r in registros:
        quantidade += 1
        valor_total += r.proposta.valor_total
        valor_pago += r.proposta.valor_pago
        saldo_aberto += r.derivados.saldo_aberto
        comissao_total += r.derivados.valor_comissao_total
        comissao_paga += r.proposta.valor_comissao_paga

    return TotaisPropostas(
        quantidade=quantidade,
        valor_total=valor_total,
        valor_pago=valor_pago,
        saldo_aberto=saldo_aberto,
        valor_comissao_total=comissao_total,
        valor_comissao_paga=comissao_paga,
        percent_recebido=_percentual(valor_pago, valor_total),
        percent_comissao_paga=_percentual(comissao_paga, comissao_total),
    )
