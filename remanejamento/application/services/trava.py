# remanejamento/application/services/trava.py
#
# Serializacao do recalculo por RemanejamentoFuncionario.
#
# Design decisions:
#   - Uma threading.Lock por remanejamento_id, criada sob demanda. Recalculos
#     do mesmo funcionario (duas conclusoes simultaneas) sao serializados;
#     funcionarios diferentes seguem em paralelo.
#   - O registro e compartilhado pelo processo inteiro (ver dependencies.py).
#     Varios workers exigiriam trava no banco; fora do escopo de um processo.
#   - Cada entrada conta quem segura ou espera a trava. A entrada sai do
#     registro quando a contagem volta a zero, entao ids desconhecidos
#     recebidos pela API nao acumulam travas.
#
# Invariants:
#   - Contagem e registro so mudam sob _guarda.
#   - Enquanto alguem segura ou espera a trava de um id, todos os demais
#     recebem a mesma instancia.
from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class TravaPorRemanejamento:
    def __init__(self) -> None:
        self._guarda = threading.Lock()
        self._travas: dict[str, threading.Lock] = {}
        self._usos: dict[str, int] = {}

    def __len__(self) -> int:
        """Ids com trava viva no registro."""
        with self._guarda:
            return len(self._travas)

    @contextmanager
    def para(self, remanejamento_id: str) -> Iterator[None]:
        with self._guarda:
            trava = self._travas.setdefault(remanejamento_id, threading.Lock())
            self._usos[remanejamento_id] = self._usos.get(remanejamento_id, 0) + 1
        try:
            with trava:
                yield
        finally:
            with self._guarda:
                self._usos[remanejamento_id] -= 1
                if self._usos[remanejamento_id] == 0:
                    del self._usos[remanejamento_id]
                    del self._travas[remanejamento_id]
