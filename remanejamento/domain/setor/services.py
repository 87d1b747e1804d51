# remanejamento/domain/setor/services.py
#
# Resolucao de setor a partir do texto livre de "responsavel".
#
# Design decisions:
#   - O texto de responsavel e digitado por humanos ("Recursos Humanos",
#     "Treinamento Operacional", "rh"). A decisao de roteamento e uma funcao
#     pura do texto normalizado; nenhum call site compara strings cruas.
#   - Ordem de classificacao (primeiro match vence): TREIN, MEDIC, RH.
#     "TREIN" vem antes para que "RH - Treinamento" seja TREINAMENTO.
#   - Texto que nao casa com nenhum setor conhecido volta normalizado
#     (pass-through) para departamentos livres.
#   - padroes_equipe() descreve COMO procurar a equipe de um setor; a busca em
#     si fica no repositorio (shell).
#
# Invariants:
#   - resolver_setor e total: nunca levanta, "" e None resolvem para "".
#   - resolver_setor(resolver_setor(x)) == resolver_setor(x).
from __future__ import annotations

import re
import unicodedata

from .value_objects import SetorCodigo

_FORA_DO_ALFABETO = re.compile(r"[^A-Za-z0-9\s]")


def normalizar_texto(texto: str | None) -> str:
    """Remove acentos e pontuacao, trim, maiusculas. "Médico-RH " -> "MEDICORH"."""
    decomposto = unicodedata.normalize("NFD", texto or "")
    return _FORA_DO_ALFABETO.sub("", decomposto).strip().upper()


def resolver_setor(texto: str | None) -> SetorCodigo | str:
    v = normalizar_texto(texto)
    if not v:
        return ""
    if "TREIN" in v:
        return SetorCodigo.TREINAMENTO
    if "MEDIC" in v:
        return SetorCodigo.MEDICINA
    if "RECURSOS" in v or "HUMANOS" in v or "RH" in v:
        return SetorCodigo.RH
    if v == SetorCodigo.LOGISTICA:
        return SetorCodigo.LOGISTICA
    return v


def padroes_equipe(setor: str | None) -> tuple[tuple[str, ...], bool]:
    """Termos para localizar a equipe dona de um setor.

    Returns:
        (termos, por_substring). Com por_substring=True, qualquer equipe cujo
        nome contenha um dos termos serve; com False, o nome deve ser igual ao
        unico termo. Termos vazios significam "nao procurar".
    """
    s = normalizar_texto(setor)
    if not s:
        return (), False
    if s == SetorCodigo.RH:
        return ("RH", "RECURSOS", "HUMANOS"), True
    if s == SetorCodigo.MEDICINA:
        return ("MEDIC",), True
    if s == SetorCodigo.TREINAMENTO:
        return ("TREIN",), True
    return (s,), False
