# comissoes/interfaces/painel/estado.py
"""Estado local do painel de comissoes.

Edicoes sao aplicadas de forma otimista (reconciliar_edicao) antes do envio
ao servidor. A resposta do servidor sempre substitui o valor provisorio.
"""
from __future__ import annotations

import httpx

from comissoes.application.services.derivacao_service import agregar, reconciliar_edicao
from comissoes.domain.proposta.entities import DadosProposta, PropostaComCalculos, TotaisPropostas
from comissoes.domain.proposta.enums import CampoProposta
from comissoes.domain.proposta.errors import PropostaNaoEncontradaError
from comissoes.infrastructure.log import log

from .cliente_http import FontePropostas


class PainelPropostas:
    def __init__(self, fonte: FontePropostas) -> None:
        self._fonte = fonte
        self._propostas: list[PropostaComCalculos] = []

    @property
    def propostas(self) -> list[PropostaComCalculos]:
        return list(self._propostas)

    def recarregar(self) -> None:
        """Leitura autoritativa completa. Descarta qualquer valor provisorio."""
        self._propostas = self._fonte.listar()

    def obter(self, proposta_id: int) -> PropostaComCalculos:
        for registro in self._propostas:
            if registro.id == proposta_id:
                return registro
        raise PropostaNaoEncontradaError(proposta_id)

    def editar_campo(
        self,
        proposta_id: int,
        campo: CampoProposta,
        valor: object,
    ) -> PropostaComCalculos | None:
        """Atualizacao otimista de um campo.

        Returns:
            O registro confirmado pelo servidor, ou None se ele nao existe mais
            (o registro local e descartado).

        Raises:
            ValorEdicaoInvalidoError: valor rejeitado; nada e enviado ao servidor.
            PropostaNaoEncontradaError: id ausente do estado local.
            httpx.HTTPError: servidor recusou ou falhou; o registro anterior e restaurado.
        """
        atual = self.obter(proposta_id)
        provisoria = reconciliar_edicao(atual, campo, valor)
        self._substituir(provisoria)

        try:
            confirmada = self._fonte.atualizar(
                proposta_id, {campo: getattr(provisoria.proposta, campo.atributo)}
            )
        except httpx.HTTPError:
            log(f"Proposta {proposta_id}: edicao recusada, valor anterior restaurado", origem="painel")
            self._substituir(atual)
            raise

        if confirmada is None:
            log(f"Proposta {proposta_id} removida no servidor; descartada localmente", origem="painel")
            self._propostas = [r for r in self._propostas if r.id != proposta_id]
            return None

        if confirmada != provisoria:
            log(f"Proposta {proposta_id}: valor do servidor substitui o provisorio", origem="painel")
        self._substituir(confirmada)
        return confirmada

    def adicionar(self, dados: DadosProposta) -> PropostaComCalculos:
        criada = self._fonte.criar(dados)
        self._propostas.append(criada)
        return criada

    def remover(self, proposta_id: int) -> bool:
        removida = self._fonte.remover(proposta_id)
        self._propostas = [r for r in self._propostas if r.id != proposta_id]
        return removida

    def totais(self) -> TotaisPropostas:
        return agregar(self._propostas)

    def _substituir(self, registro: PropostaComCalculos) -> None:
        self._propostas = [registro if r.id == registro.id else r for r in self._propostas]
