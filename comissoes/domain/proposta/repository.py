# comissoes/domain/proposta/repository.py
from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from .entities import DadosProposta, Proposta
from .enums import CampoProposta


class PropostaRepository(Protocol):
    def listar_todas(self) -> list[Proposta]: ...
    def obter_por_id(self, proposta_id: int) -> Proposta | None: ...
    def criar(self, dados: DadosProposta) -> Proposta: ...
    def atualizar_campos(
        self, proposta_id: int, campos: Mapping[CampoProposta, object]
    ) -> Proposta | None: ...
    def remover(self, proposta_id: int) -> bool: ...
