# tests/domain/test_politicas.py
from datetime import UTC, datetime

import pytest

from remanejamento.domain.remanejamento.politicas import (
    MOTIVO_DEVOLUCAO_TREINAMENTO,
    Override,
    aplicar_politicas,
    calcular_status_base,
    politica_devolucao_treinamento,
    tem_treinamento_ativo,
)
from remanejamento.domain.remanejamento.value_objects import StatusTarefas
from remanejamento.domain.setor.value_objects import SetorCodigo
from remanejamento.domain.tarefa.entities import Tarefa
from remanejamento.domain.tarefa.value_objects import Prioridade, StatusTarefa

SUBMETER = StatusTarefas.SUBMETER_RASCUNHO
ATENDER = StatusTarefas.ATENDER_TAREFAS


def _tarefa(status: StatusTarefa = StatusTarefa.PENDENTE, responsavel: str = "RH") -> Tarefa:
    return Tarefa(
        id=f"t-{responsavel}-{status}",
        remanejamento_funcionario_id="rem-1",
        tipo="Documentacao",
        responsavel=responsavel,
        status=status,
        prioridade=Prioridade.MEDIA,
        data_criacao=datetime(2024, 1, 10, tzinfo=UTC),
    )


# ---------- status base ----------


def test_lista_vazia_submete():
    assert calcular_status_base([]) == SUBMETER


@pytest.mark.parametrize(
    "status",
    [StatusTarefa.PENDENTE, StatusTarefa.AGUARDANDO_APROVACAO, StatusTarefa.REPROVADO],
)
def test_qualquer_tarefa_aberta_exige_atendimento(status: StatusTarefa) -> None:
    tarefas = [_tarefa(StatusTarefa.CONCLUIDO), _tarefa(status)]
    assert calcular_status_base(tarefas) == ATENDER


def test_concluido_concluida_e_cancelado_contam_como_resolvidos():
    tarefas = [
        _tarefa(StatusTarefa.CONCLUIDO),
        _tarefa(StatusTarefa.CONCLUIDA),
        _tarefa(StatusTarefa.CANCELADO),
    ]
    assert calcular_status_base(tarefas) == SUBMETER


# ---------- devolucao para TREINAMENTO ----------


def test_treinamento_cancelado_nao_conta_como_ativo():
    assert not tem_treinamento_ativo([_tarefa(StatusTarefa.CANCELADO, "Treinamento")])
    assert tem_treinamento_ativo([_tarefa(StatusTarefa.CONCLUIDO, "Treinamento Operacional")])


def test_logistica_sem_treinamento_devolve():
    override = politica_devolucao_treinamento("LOGISTICA", [_tarefa(StatusTarefa.CONCLUIDO)])
    assert override is not None
    assert override.status == ATENDER
    assert override.devolver_para == SetorCodigo.TREINAMENTO
    assert override.motivo == MOTIVO_DEVOLUCAO_TREINAMENTO


def test_logistica_com_acento_e_minuscula_tambem_devolve():
    assert politica_devolucao_treinamento("logística", []) is not None


def test_outros_donos_nao_devolvem():
    assert politica_devolucao_treinamento("RH", []) is None
    assert politica_devolucao_treinamento("", []) is None


def test_logistica_com_treinamento_ativo_nao_devolve():
    assert politica_devolucao_treinamento("LOGISTICA", [_tarefa(StatusTarefa.PENDENTE, "Treinamento")]) is None


# ---------- aplicar_politicas ----------


def test_devolucao_vence_status_base_mesmo_com_lista_vazia():
    decisao = aplicar_politicas("LOGISTICA", [])
    assert decisao.status_base == SUBMETER
    assert decisao.status == ATENDER
    assert decisao.devolvido


def test_logistica_com_treinamento_concluido_submete():
    decisao = aplicar_politicas("LOGISTICA", [_tarefa(StatusTarefa.CONCLUIDO, "Treinamento")])
    assert decisao.status == SUBMETER
    assert not decisao.devolvido


def test_logistica_com_treinamento_pendente_atende_sem_devolver():
    decisao = aplicar_politicas("LOGISTICA", [_tarefa(StatusTarefa.PENDENTE, "Treinamento")])
    assert decisao.status == ATENDER
    assert decisao.override is None


def test_primeira_politica_que_se_aplica_vence():
    def sempre(nome: str):
        return lambda _dono, _tarefas: Override(nome, ATENDER, SetorCodigo.MEDICINA, nome)

    decisao = aplicar_politicas("RH", [], politicas=[lambda *_: None, sempre("a"), sempre("b")])
    assert decisao.override is not None
    assert decisao.override.nome == "a"


def test_sem_politicas_status_e_o_base():
    assert aplicar_politicas("LOGISTICA", [], politicas=()).status == SUBMETER


@pytest.mark.parametrize("dono", ["RH", "LOGISTICA", "MEDICINA", ""])
@pytest.mark.parametrize(
    "tarefas",
    [
        [],
        [StatusTarefa.CONCLUIDO],
        [StatusTarefa.CONCLUIDO, StatusTarefa.PENDENTE],
        [StatusTarefa.CANCELADO],
    ],
)
@pytest.mark.parametrize("responsavel", ["RH", "Treinamento"])
def test_submeter_se_e_somente_se_resolvidas_e_sem_devolucao(
    dono: str, tarefas: list[StatusTarefa], responsavel: str,
) -> None:
    lista = [_tarefa(s, responsavel) for s in tarefas]
    resolvidas = all(s in (StatusTarefa.CONCLUIDO, StatusTarefa.CANCELADO) for s in tarefas)
    devolve = dono == "LOGISTICA" and not any(
        s != StatusTarefa.CANCELADO and responsavel == "Treinamento" for s in tarefas
    )
    esperado = SUBMETER if resolvidas and not devolve else ATENDER
    assert aplicar_politicas(dono, lista).status == esperado
