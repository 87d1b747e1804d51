# remanejamento/application/services/status_engine.py
#
# Imperative shell do status agregado de tarefas (statusTarefas).
#
# Design decisions:
#   - Unico ponto de escrita de status_tarefas: recebe um StatusTarefasWriter
#     que nenhum outro servico conhece.
#   - A decisao (base + overrides) e pura e mora em domain/remanejamento/
#     politicas.py. Aqui so ha IO: carregar, gravar, auditar, anotar.
#   - Sequencia {carregar tarefas, decidir, gravar status, historico,
#     observacao} roda sob a trava do remanejamento (TravaPorRemanejamento).
#   - Gravar o status e o efeito principal e propaga erro. Historico,
#     observacao automatica e fechamento da solicitacao sao best effort:
#     falham para avisos no ResultadoRecalculo, nunca desfazem o status.
#   - O dono (responsavel_atual) nao e reescrito. A devolucao para TREINAMENTO
#     fica registrada na observacao automatica e no historico (DEVOLUCAO), e o
#     status forcado se mantem estavel em recalculos seguidos.
#
# Invariants:
#   - Remanejamento inexistente: nenhuma escrita, resultado com aviso.
#   - Recalcular duas vezes sem mudanca nas tarefas produz o mesmo status.
#   - Com dedup_observacao=True, a observacao de devolucao nao se repete
#     enquanto ela for a ultima observacao do remanejamento.
from __future__ import annotations

import uuid
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

import duckdb

from remanejamento.domain.historico.entities import RegistroHistorico
from remanejamento.domain.historico.repository import HistoricoRepository
from remanejamento.domain.historico.value_objects import USUARIO_SISTEMA, Entidade, TipoAcao
from remanejamento.domain.observacao.entities import Observacao
from remanejamento.domain.observacao.repository import ObservacaoRepository
from remanejamento.domain.remanejamento.entities import RemanejamentoFuncionario
from remanejamento.domain.remanejamento.politicas import POLITICAS, Override, Politica, aplicar_politicas
from remanejamento.domain.remanejamento.repository import (
    RemanejamentoRepository,
    SolicitacaoRepository,
    StatusTarefasWriter,
)
from remanejamento.domain.remanejamento.value_objects import PRESTSERV_APROVADO, StatusTarefas
from remanejamento.domain.tarefa.repository import TarefaRepository
from remanejamento.log import log

from ._efeitos import tentar
from .trava import TravaPorRemanejamento


def _agora() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class ResultadoRecalculo:
    remanejamento_id: str
    status_anterior: StatusTarefas | None
    status_novo: StatusTarefas | None
    devolvido: bool = False
    solicitacao_concluida: bool = False
    avisos: tuple[str, ...] = ()

    @property
    def mudou(self) -> bool:
        return self.status_novo is not None and self.status_anterior != self.status_novo


class StatusEngine:
    def __init__(
        self,
        remanejamento_repo: RemanejamentoRepository,
        status_writer: StatusTarefasWriter,
        tarefa_repo: TarefaRepository,
        observacao_repo: ObservacaoRepository,
        historico_repo: HistoricoRepository,
        solicitacao_repo: SolicitacaoRepository | None = None,
        travas: TravaPorRemanejamento | None = None,
        *,
        auditar_sem_mudanca: bool = True,
        dedup_observacao: bool = True,
        tentativas_efeitos: int = 1,
        politicas: Sequence[Politica] = POLITICAS,
        relogio: Callable[[], datetime] = _agora,
    ) -> None:
        self._remanejamento_repo = remanejamento_repo
        self._status_writer = status_writer
        self._tarefa_repo = tarefa_repo
        self._observacao_repo = observacao_repo
        self._historico_repo = historico_repo
        self._solicitacao_repo = solicitacao_repo
        self._travas = travas if travas is not None else TravaPorRemanejamento()
        self._auditar_sem_mudanca = auditar_sem_mudanca
        self._dedup_observacao = dedup_observacao
        self._tentativas = tentativas_efeitos
        self._politicas = tuple(politicas)
        self._relogio = relogio

    def recalcular(self, remanejamento_id: str, ator: str | None = None) -> ResultadoRecalculo:
        """Recalcula e grava status_tarefas. Chamar apos QUALQUER mudanca de tarefa."""
        ator = ator or USUARIO_SISTEMA
        with self._travas.para(remanejamento_id):
            rem = self._remanejamento_repo.buscar_por_id(remanejamento_id)
            if rem is None:
                aviso = f"RemanejamentoFuncionario {remanejamento_id} nao encontrado; recalculo abortado"
                log(aviso, "WARNING")
                return ResultadoRecalculo(remanejamento_id, None, None, avisos=(aviso,))

            tarefas = self._tarefa_repo.listar_ativas(remanejamento_id)
            decisao = aplicar_politicas(rem.responsavel_atual, tarefas, self._politicas)
            self._status_writer.gravar_status_tarefas(remanejamento_id, decisao.status)

            avisos: list[str] = []
            if rem.status_tarefas != decisao.status or self._auditar_sem_mudanca:
                avisos += tentar(
                    lambda: self._registrar_status(rem, decisao.status, ator),
                    f"historico de status de {remanejamento_id}",
                    self._tentativas,
                )

            if decisao.override is not None:
                avisos += self._registrar_devolucao(rem, decisao.override, ator)

            concluida = False
            if decisao.status == StatusTarefas.SUBMETER_RASCUNHO and rem.status_prestserv == PRESTSERV_APROVADO:
                concluida, avisos_solicitacao = self._verificar_conclusao_solicitacao(rem, ator)
                avisos += avisos_solicitacao

        return ResultadoRecalculo(
            remanejamento_id=remanejamento_id,
            status_anterior=rem.status_tarefas,
            status_novo=decisao.status,
            devolvido=decisao.devolvido,
            solicitacao_concluida=concluida,
            avisos=tuple(avisos),
        )

    def _registrar_status(self, rem: RemanejamentoFuncionario, novo: StatusTarefas, ator: str) -> None:
        self._historico_repo.registrar(RegistroHistorico(
            id=str(uuid.uuid4()),
            tipo_acao=TipoAcao.ATUALIZACAO_STATUS,
            entidade=Entidade.STATUS_TAREFAS,
            descricao_acao=f"Status geral das tarefas atualizado para: {novo.value}",
            usuario_responsavel=ator,
            data_acao=self._relogio(),
            solicitacao_id=rem.solicitacao_id,
            remanejamento_funcionario_id=rem.id,
            campo_alterado="statusTarefas",
            valor_anterior=rem.status_tarefas.value if rem.status_tarefas else None,
            valor_novo=novo.value,
        ))

    def _registrar_devolucao(self, rem: RemanejamentoFuncionario, override: Override, ator: str) -> list[str]:
        if self._dedup_observacao:
            try:
                ultima = self._observacao_repo.ultima(rem.id)
            except duckdb.Error as err:
                log(f"falha ao ler ultima observacao de {rem.id}: {err}", "WARNING")
                ultima = None
            if ultima is not None and ultima.automatica_devolucao:
                return []

        agora = self._relogio()
        observacao = Observacao(
            id=str(uuid.uuid4()),
            remanejamento_funcionario_id=rem.id,
            texto=f"{override.motivo} Data: {agora.isoformat()}",
            criado_por=ator,
            data_criacao=agora,
        )
        avisos = tentar(
            lambda: self._observacao_repo.inserir(observacao),
            f"observacao de devolucao de {rem.id}",
            self._tentativas,
        )
        avisos += tentar(
            lambda: self._historico_repo.registrar(RegistroHistorico(
                id=str(uuid.uuid4()),
                tipo_acao=TipoAcao.DEVOLUCAO,
                entidade=Entidade.RESPONSAVEL_ATUAL,
                descricao_acao=override.motivo,
                usuario_responsavel=ator,
                data_acao=agora,
                solicitacao_id=rem.solicitacao_id,
                remanejamento_funcionario_id=rem.id,
                campo_alterado="responsavelAtual",
                valor_anterior=rem.responsavel_atual,
                valor_novo=override.devolver_para.value,
            )),
            f"historico de devolucao de {rem.id}",
            self._tentativas,
        )
        log(f"remanejamento {rem.id} devolvido para {override.devolver_para} ({override.nome})")
        return avisos

    def _verificar_conclusao_solicitacao(
        self, rem: RemanejamentoFuncionario, ator: str,
    ) -> tuple[bool, list[str]]:
        """Fecha a solicitacao quando todos os funcionarios estao prontos e aprovados."""
        if self._solicitacao_repo is None:
            return False, []
        solicitacao_repo = self._solicitacao_repo

        try:
            irmaos = self._remanejamento_repo.listar_por_solicitacao(rem.solicitacao_id)
        except duckdb.Error as err:
            aviso = f"conclusao da solicitacao {rem.solicitacao_id} nao verificada: {err}"
            log(aviso, "ERROR")
            return False, [aviso]
        prontos = all(
            r.status_tarefas == StatusTarefas.SUBMETER_RASCUNHO and r.status_prestserv == PRESTSERV_APROVADO
            for r in irmaos
        )
        if not irmaos or not prontos:
            return False, []

        agora = self._relogio()

        def _fechar() -> None:
            solicitacao_repo.marcar_concluida(rem.solicitacao_id, agora)
            self._historico_repo.registrar(RegistroHistorico(
                id=str(uuid.uuid4()),
                tipo_acao=TipoAcao.ATUALIZACAO_STATUS,
                entidade=Entidade.SOLICITACAO,
                descricao_acao=f"Solicitacao {rem.solicitacao_id} concluida: todos os funcionarios prontos",
                usuario_responsavel=ator,
                data_acao=agora,
                solicitacao_id=rem.solicitacao_id,
                campo_alterado="status",
                valor_novo="CONCLUIDO",
            ))

        avisos = tentar(_fechar, f"conclusao da solicitacao {rem.solicitacao_id}", self._tentativas)
        if not avisos:
            log(f"solicitacao {rem.solicitacao_id} marcada como concluida")
        return not avisos, avisos
