# comissoes/interfaces/painel/cliente_http.py
from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Protocol

import httpx

from comissoes.application.services.derivacao_service import com_calculos
from comissoes.domain.proposta.entities import DadosProposta, Proposta, PropostaComCalculos
from comissoes.domain.proposta.enums import CampoProposta

_BASE = "/api/proposals"


class FontePropostas(Protocol):
    """Lado autoritativo visto pelo painel."""

    def listar(self) -> list[PropostaComCalculos]: ...
    def criar(self, dados: DadosProposta) -> PropostaComCalculos: ...
    def atualizar(
        self, proposta_id: int, campos: Mapping[CampoProposta, object]
    ) -> PropostaComCalculos | None: ...
    def remover(self, proposta_id: int) -> bool: ...


def _para_json(valor: object) -> object:
    return str(valor) if isinstance(valor, Decimal) else valor


def _hidratar(data: dict[str, Any]) -> PropostaComCalculos:
    """Le apenas os campos persistidos; os derivados sao recalculados localmente."""
    proposta = Proposta(
        id=int(data["id"]),
        proposta=str(data["proposta"]),
        valor_total=Decimal(str(data["valorTotal"])),
        valor_pago=Decimal(str(data["valorPago"])),
        percent_comissao=Decimal(str(data["percentComissao"])),
        valor_comissao_paga=Decimal(str(data["valorComissaoPaga"])),
    )
    return com_calculos(proposta)


class ClientePropostasHTTP:
    """Cliente da API de propostas. Aceita qualquer httpx.Client (inclusive TestClient)."""

    def __init__(self, http: httpx.Client) -> None:
        self._http = http

    def listar(self) -> list[PropostaComCalculos]:
        response = self._http.get(_BASE)
        response.raise_for_status()
        return [_hidratar(item) for item in response.json()]

    def obter(self, proposta_id: int) -> PropostaComCalculos | None:
        response = self._http.get(f"{_BASE}/{proposta_id}")
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return _hidratar(response.json())

    def criar(self, dados: DadosProposta) -> PropostaComCalculos:
        response = self._http.post(
            _BASE,
            json={
                CampoProposta.PROPOSTA.value: dados.proposta,
                CampoProposta.VALOR_TOTAL.value: str(dados.valor_total),
                CampoProposta.VALOR_PAGO.value: str(dados.valor_pago),
                CampoProposta.PERCENT_COMISSAO.value: str(dados.percent_comissao),
                CampoProposta.VALOR_COMISSAO_PAGA.value: str(dados.valor_comissao_paga),
            },
        )
        response.raise_for_status()
        return _hidratar(response.json())

    def atualizar(
        self,
        proposta_id: int,
        campos: Mapping[CampoProposta, object],
    ) -> PropostaComCalculos | None:
        response = self._http.patch(
            f"{_BASE}/{proposta_id}",
            json={campo.value: _para_json(valor) for campo, valor in campos.items()},
        )
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return _hidratar(response.json())

    def remover(self, proposta_id: int) -> bool:
        response = self._http.delete(f"{_BASE}/{proposta_id}")
        if response.status_code == 404:
            return False
        response.raise_for_status()
        return True
