# comissoes/domain/proposta/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

_CEM = Decimal("100")


def para_decimal(bruto: object) -> Decimal:
    """Converte int/float/str/Decimal em Decimal finito. Nunca aceita bool."""
    if isinstance(bruto, bool) or not isinstance(bruto, (int, float, str, Decimal)):
        raise ValueError(f"Valor nao numerico: {bruto!r}")
    try:
        valor = bruto if isinstance(bruto, Decimal) else Decimal(str(bruto).strip())
    except InvalidOperation as err:
        raise ValueError(f"Valor nao numerico: {bruto!r}") from err
    if not valor.is_finite():
        raise ValueError(f"Valor nao finito: {bruto!r}")
    return valor


@dataclass(frozen=True)
class ValorMonetario:
    """Valor em Decimal. Nunca float. Nunca negativo."""

    valor: Decimal

    def __post_init__(self) -> None:
        if not self.valor.is_finite():
            raise ValueError("Valor monetario deve ser finito")
        if self.valor < Decimal("0"):
            raise ValueError("Valor monetario nao pode ser negativo")


@dataclass(frozen=True)
class PercentualComissao:
    """Percentual de comissao em [0, 100]."""

    valor: Decimal

    def __post_init__(self) -> None:
        if not self.valor.is_finite():
            raise ValueError("Percentual de comissao deve ser finito")
        if self.valor < Decimal("0") or self.valor > _CEM:
            raise ValueError("Percentual de comissao deve estar entre 0 e 100")


@dataclass(frozen=True)
class RotuloProposta:
    """Identificacao livre da proposta, nao-vazia, trimada."""

    valor: str

    def __post_init__(self) -> None:
        if not isinstance(self.valor, str):
            raise ValueError("Proposta deve ser texto")
        stripped = self.valor.strip()
        if not stripped:
            raise ValueError("Proposta nao pode ser vazia")
        object.__setattr__(self, "valor", stripped)
