# tests/integration/test_painel_http.py
from decimal import Decimal

import httpx
import pytest
from fastapi.testclient import TestClient

from comissoes.domain.proposta.entities import DadosProposta
from comissoes.domain.proposta.enums import CampoProposta
from comissoes.domain.proposta.errors import ValorEdicaoInvalidoError
from comissoes.interfaces.painel.cliente_http import ClientePropostasHTTP
from comissoes.interfaces.painel.estado import PainelPropostas


@pytest.fixture()
def painel(client: TestClient) -> PainelPropostas:
    p = PainelPropostas(ClientePropostasHTTP(client))
    p.recarregar()
    return p


def test_recarregar_deriva_localmente(painel: PainelPropostas) -> None:
    orlando = painel.obter(1)
    assert orlando.derivados.saldo_aberto == Decimal("12250")
    assert orlando.derivados.percent_comissao_paga == Decimal("50")


def test_edicao_confirmada_pelo_servidor(painel: PainelPropostas, client: TestClient) -> None:
    confirmada = painel.editar_campo(1, CampoProposta.VALOR_PAGO, 24500)
    assert confirmada is not None
    assert confirmada.derivados.saldo_aberto == Decimal("0")
    assert client.get("/api/proposals/1").json()["valorPago"] == "24500.00"


def test_servidor_prevalece_sobre_valor_provisorio(painel: PainelPropostas, client: TestClient) -> None:
    """DECIMAL(10, 2) descarta a terceira casa; o painel adota o valor confirmado."""
    confirmada = painel.editar_campo(1, CampoProposta.VALOR_PAGO, "100.129")
    persistido = Decimal(client.get("/api/proposals/1").json()["valorPago"])
    assert confirmada is not None
    assert confirmada.proposta.valor_pago == persistido
    assert persistido != Decimal("100.129")
    assert painel.obter(1).proposta.valor_pago == persistido


def test_edicao_invalida_nao_chega_ao_servidor(painel: PainelPropostas, client: TestClient) -> None:
    with pytest.raises(ValorEdicaoInvalidoError):
        painel.editar_campo(1, CampoProposta.PERCENT_COMISSAO, 150)
    assert client.get("/api/proposals/1").json()["percentComissao"] == "10.00"


def test_proposta_removida_no_servidor_sai_do_painel(painel: PainelPropostas, client: TestClient) -> None:
    client.delete("/api/proposals/2")
    assert painel.editar_campo(2, CampoProposta.VALOR_PAGO, 1) is None
    assert [r.id for r in painel.propostas] == [1]


def test_adicionar_remover_e_totais(painel: PainelPropostas) -> None:
    criada = painel.adicionar(
        DadosProposta("Nova", Decimal("1000"), Decimal("500"), Decimal("10"), Decimal("50"))
    )
    assert criada.id == 3
    assert painel.totais().quantidade == 3
    assert painel.remover(3) is True
    assert painel.remover(3) is False
    assert painel.totais().valor_total == Decimal("39800")


def test_cliente_obter_inexistente(client: TestClient) -> None:
    assert ClientePropostasHTTP(client).obter(999) is None


def test_edicao_recusada_pelo_servidor_restaura_valor_anterior(
    painel: PainelPropostas, client: TestClient
) -> None:
    """200000000 passa na validacao local, mas excede DECIMAL(10, 2) no servidor."""
    totais_antes = painel.totais()
    with pytest.raises(httpx.HTTPStatusError):
        painel.editar_campo(1, CampoProposta.VALOR_TOTAL, 200000000)
    assert painel.obter(1).proposta.valor_total == Decimal("24500")
    assert painel.obter(1).derivados.saldo_aberto == Decimal("12250")
    assert painel.totais() == totais_antes
    assert client.get("/api/proposals/1").json()["valorTotal"] == "24500.00"
