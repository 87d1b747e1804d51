# remanejamento/domain/resultado.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Resultado(Generic[T]):
    """Efeito principal + avisos dos efeitos secundarios (best effort).

    `valor` e o que importa para quem chamou. `avisos` lista falhas de passos
    que nao desfazem o efeito principal (historico, observacao, recalculo).
    """

    valor: T
    avisos: tuple[str, ...] = ()

    @property
    def ok_sem_avisos(self) -> bool:
        return not self.avisos
