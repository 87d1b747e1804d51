# remanejamento/domain/erros.py
"""Erros de dominio. Sempre levantados ANTES de qualquer escrita."""
from __future__ import annotations


class ErroDominio(Exception):
    """Base para regras de negocio violadas (nao sao bugs)."""


class ValidacaoError(ErroDominio):
    """Campo obrigatorio ausente ou valor invalido."""

    def __init__(self, campo: str, mensagem: str | None = None) -> None:
        self.campo = campo
        super().__init__(mensagem or f"Campo obrigatorio: {campo}")


class NaoEncontradoError(ErroDominio):
    def __init__(self, entidade: str, identificador: object) -> None:
        self.entidade = entidade
        self.identificador = identificador
        super().__init__(f"{entidade} nao encontrado(a): {identificador}")


class EstadoInvalidoError(ErroDominio):
    """Operacao proibida pelo estado atual do registro."""
