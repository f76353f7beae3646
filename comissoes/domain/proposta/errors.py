# comissoes/domain/proposta/errors.py
from __future__ import annotations

from .enums import CampoProposta


class ValorEdicaoInvalidoError(ValueError):
    """Edicao rejeitada: valor nao finito, negativo ou percentual fora de [0, 100].

    Nao e fatal. O registro original permanece intacto.
    """

    def __init__(self, campo: CampoProposta, valor: object, motivo: str) -> None:
        super().__init__(f"Valor invalido para {campo.value}: {valor!r} ({motivo})")
        self.campo = campo
        self.valor = valor
        self.motivo = motivo


class PropostaNaoEncontradaError(LookupError):
    def __init__(self, proposta_id: int) -> None:
        super().__init__(f"Proposta {proposta_id} nao encontrada")
        self.proposta_id = proposta_id
