# tests/domain/test_proposta_vo.py
from decimal import Decimal

import pytest

from comissoes.domain.proposta.entities import DadosProposta
from comissoes.domain.proposta.enums import CampoProposta
from comissoes.domain.proposta.value_objects import (
    PercentualComissao,
    RotuloProposta,
    ValorMonetario,
    para_decimal,
)


def test_valor_monetario_negativo_invalido():
    with pytest.raises(ValueError, match="negativo"):
        ValorMonetario(Decimal("-1"))


def test_valor_monetario_zero_valido():
    assert ValorMonetario(Decimal("0")).valor == Decimal("0")


def test_valor_monetario_nao_finito_invalido():
    with pytest.raises(ValueError, match="finito"):
        ValorMonetario(Decimal("Infinity"))


def test_percentual_faixa():
    assert PercentualComissao(Decimal("100")).valor == Decimal("100")
    with pytest.raises(ValueError, match="entre 0 e 100"):
        PercentualComissao(Decimal("100.01"))
    with pytest.raises(ValueError):
        PercentualComissao(Decimal("-0.5"))


def test_rotulo_trimado_e_nao_vazio():
    assert RotuloProposta("  178.09 – Alexandre Lima ").valor == "178.09 – Alexandre Lima"
    with pytest.raises(ValueError, match="vazia"):
        RotuloProposta("   ")


def test_para_decimal():
    assert para_decimal("12.50") == Decimal("12.50")
    assert para_decimal(0.1) == Decimal("0.1")
    assert para_decimal(3) == Decimal("3")
    for invalido in ("NaN", "inf", "x", True, None, [1]):
        with pytest.raises(ValueError):
            para_decimal(invalido)


def test_dados_validados():
    dados = DadosProposta.validados(" A ", Decimal("10"), Decimal("0"), Decimal("5"), Decimal("0"))
    assert dados.proposta == "A"
    with pytest.raises(ValueError):
        DadosProposta.validados("A", Decimal("10"), Decimal("0"), Decimal("101"), Decimal("0"))


def test_campo_atributo():
    assert CampoProposta("valorComissaoPaga").atributo == "valor_comissao_paga"
    assert not CampoProposta.PROPOSTA.numerico
    assert all(c.numerico for c in CampoProposta if c is not CampoProposta.PROPOSTA)
