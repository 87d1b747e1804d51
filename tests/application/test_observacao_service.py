# tests/application/test_observacao_service.py
import pytest

from remanejamento.domain.erros import NaoEncontradoError, ValidacaoError


def test_adicionar_observacao(ambiente, agora):
    observacao = ambiente.observacoes.adicionar("rem-rh", "  Documentos entregues ", autor="ana")

    assert observacao.texto == "Documentos entregues"
    assert observacao.criado_por == "ana"
    assert observacao.data_criacao == agora
    assert ambiente.observacoes.listar("rem-rh") == [observacao]


def test_autor_padrao_e_sistema(ambiente):
    assert ambiente.observacoes.adicionar("rem-rh", "ok").criado_por == "Sistema"


@pytest.mark.parametrize("texto", ["", "   ", None])
def test_texto_obrigatorio(ambiente, texto):
    with pytest.raises(ValidacaoError) as exc:
        ambiente.observacoes.adicionar("rem-rh", texto)
    assert exc.value.campo == "texto"


def test_remanejamento_inexistente(ambiente):
    with pytest.raises(NaoEncontradoError):
        ambiente.observacoes.adicionar("rem-fantasma", "texto")


def test_listar_mais_recente_primeiro(ambiente):
    ambiente.observacoes.adicionar("rem-rh", "primeira")
    ambiente.observacoes.adicionar("rem-rh", "segunda")

    assert [o.texto for o in ambiente.observacoes.listar("rem-rh")] == ["segunda", "primeira"]
