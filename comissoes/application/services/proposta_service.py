# comissoes/application/services/proposta_service.py
from __future__ import annotations

from collections.abc import Mapping

from comissoes.domain.proposta.entities import DadosProposta, PropostaComCalculos, TotaisPropostas
from comissoes.domain.proposta.enums import CampoProposta
from comissoes.domain.proposta.repository import PropostaRepository

from .derivacao_service import agregar, com_calculos, validar_valor


class PropostaService:
    """Imperative Shell: IO no repositorio, derivacao no Pure Core.

    Todo registro que sai daqui ja passou por `com_calculos`.
    """

    def __init__(self, repo: PropostaRepository) -> None:
        self._repo = repo

    def listar(self) -> list[PropostaComCalculos]:
        return [com_calculos(p) for p in self._repo.listar_todas()]

    def obter(self, proposta_id: int) -> PropostaComCalculos | None:
        proposta = self._repo.obter_por_id(proposta_id)
        return com_calculos(proposta) if proposta else None

    def criar(self, dados: DadosProposta) -> PropostaComCalculos:
        return com_calculos(self._repo.criar(dados))

    def atualizar(
        self,
        proposta_id: int,
        campos: Mapping[CampoProposta, object],
    ) -> PropostaComCalculos | None:
        """ValueError se algum valor for invalido; None se o id nao existir."""
        normalizados = {campo: validar_valor(campo, valor) for campo, valor in campos.items()}
        proposta = self._repo.atualizar_campos(proposta_id, normalizados)
        return com_calculos(proposta) if proposta else None

    def remover(self, proposta_id: int) -> bool:
        return self._repo.remover(proposta_id)

    def totais(self) -> TotaisPropostas:
        return agregar(self.listar())
