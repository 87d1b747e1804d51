# tests/domain/test_prioridade.py
import pytest

from remanejamento.domain.tarefa.value_objects import Prioridade, StatusTarefa, normalizar_prioridade, parse_status


@pytest.mark.parametrize(
    ("texto", "esperado"),
    [
        ("baixa", Prioridade.BAIXA),
        ("Media", Prioridade.MEDIA),
        ("média", Prioridade.MEDIA),
        ("Normal", Prioridade.MEDIA),
        ("ALTA", Prioridade.ALTA),
        ("urgente", Prioridade.URGENTE),
    ],
)
def test_normalizar_prioridade(texto: str, esperado: Prioridade) -> None:
    assert normalizar_prioridade(texto) == esperado


def test_prioridade_desconhecida_vira_media():
    assert normalizar_prioridade("critica") == Prioridade.MEDIA
    assert normalizar_prioridade(None) == Prioridade.MEDIA
    assert normalizar_prioridade("") == Prioridade.MEDIA


def test_parse_status_aceita_caixa_mista():
    assert parse_status(" concluida ") == StatusTarefa.CONCLUIDA


def test_parse_status_desconhecido_levanta():
    with pytest.raises(ValueError):
        parse_status("FEITO")
