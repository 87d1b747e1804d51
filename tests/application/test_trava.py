# tests/application/test_trava.py
import threading
import time

from remanejamento.application.services.status_engine import StatusEngine
from remanejamento.application.services.trava import TravaPorRemanejamento


def _em_paralelo(alvo, n: int) -> None:
    threads = [threading.Thread(target=alvo) for _ in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()


def test_recalculos_do_mesmo_id_sao_serializados():
    travas = TravaPorRemanejamento()
    ativos = 0
    pico = 0
    contador = threading.Lock()

    def trabalho() -> None:
        nonlocal ativos, pico
        with travas.para("rem-1"):
            with contador:
                ativos += 1
                pico = max(pico, ativos)
            time.sleep(0.01)
            with contador:
                ativos -= 1

    _em_paralelo(trabalho, 8)

    assert pico == 1
    assert len(travas) == 0


def test_ids_diferentes_nao_se_bloqueiam():
    travas = TravaPorRemanejamento()
    entrou = threading.Event()

    def outro_id() -> None:
        with travas.para("rem-2"):
            entrou.set()

    with travas.para("rem-1"):
        t = threading.Thread(target=outro_id)
        t.start()
        assert entrou.wait(timeout=1)
        t.join()


def test_registro_esvazia_quando_todos_liberam():
    travas = TravaPorRemanejamento()
    with travas.para("rem-1"):
        with travas.para("rem-2"):
            assert len(travas) == 2
        assert len(travas) == 1
    assert len(travas) == 0


def test_trava_liberada_mesmo_com_erro():
    travas = TravaPorRemanejamento()
    try:
        with travas.para("rem-1"):
            raise RuntimeError("falha no recalculo")
    except RuntimeError:
        pass
    assert len(travas) == 0
    with travas.para("rem-1"):
        pass


def test_recalcular_ids_desconhecidos_nao_acumula_travas(ambiente, agora):
    travas = TravaPorRemanejamento()
    engine = StatusEngine(
        remanejamento_repo=ambiente.remanejamentos,
        status_writer=ambiente.remanejamentos,
        tarefa_repo=ambiente.tarefa_repo,
        observacao_repo=ambiente.observacao_repo,
        historico_repo=ambiente.historico,
        travas=travas,
        relogio=lambda: agora,
    )
    for i in range(200):
        engine.recalcular(f"rem-fantasma-{i}")
    engine.recalcular("rem-rh")

    assert len(travas) == 0


def test_engine_usa_o_registro_compartilhado_mesmo_vazio(ambiente, agora):
    travas = TravaPorRemanejamento()
    engine = StatusEngine(
        remanejamento_repo=ambiente.remanejamentos,
        status_writer=ambiente.remanejamentos,
        tarefa_repo=ambiente.tarefa_repo,
        observacao_repo=ambiente.observacao_repo,
        historico_repo=ambiente.historico,
        travas=travas,
        relogio=lambda: agora,
    )
    terminou = threading.Event()

    def recalcular() -> None:
        engine.recalcular("rem-fantasma")
        terminou.set()

    with travas.para("rem-fantasma"):
        t = threading.Thread(target=recalcular)
        t.start()
        assert not terminou.wait(timeout=0.1)
    t.join(timeout=1)
    assert terminou.is_set()
