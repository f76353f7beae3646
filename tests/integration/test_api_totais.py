# tests/integration/test_api_totais.py
from fastapi.testclient import TestClient


def test_totais(client: TestClient) -> None:
    response = client.get("/api/proposals/totais")
    assert response.status_code == 200
    data = response.json()
    assert data["quantidade"] == 2
    assert data["valorTotal"] == "39800.00"
    assert data["valorPago"] == "12250.00"
    assert data["saldoAberto"] == "27550.00"
    assert data["valorComissaoTotal"] == "3674.00"
    assert data["valorComissaoPaga"] == "1225.00"
    assert data["percentRecebido"] == "30.78"
    assert data["percentComissaoPaga"] == "33.34"


def test_totais_graficos(client: TestClient) -> None:
    graficos = client.get("/api/proposals/totais").json()["graficos"]
    pagamento, comissao = graficos
    assert [f["rotulo"] for f in pagamento["fatias"]] == ["Recebido", "A Receber"]
    assert [f["valor"] for f in pagamento["fatias"]] == ["12250.00", "27550.00"]
    assert [f["valor"] for f in comissao["fatias"]] == ["1225.00", "2449.00"]


def test_totais_sem_propostas(client: TestClient) -> None:
    client.delete("/api/proposals/1")
    client.delete("/api/proposals/2")
    data = client.get("/api/proposals/totais").json()
    assert data["quantidade"] == 0
    assert data["percentRecebido"] == "0.00"
    assert data["percentComissaoPaga"] == "0.00"


def test_totais_acompanham_edicao(client: TestClient) -> None:
    client.patch("/api/proposals/2", json={"valorPago": 15300})
    data = client.get("/api/proposals/totais").json()
    assert data["percentRecebido"] == "69.22"
