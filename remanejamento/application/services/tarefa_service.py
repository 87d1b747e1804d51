# remanejamento/application/services/tarefa_service.py
"""Task Store: criacao, listagem e transicoes de status de tarefas.

Toda mutacao termina chamando StatusEngine.recalcular. Falhas depois da
gravacao da tarefa (historico, recalculo) viram avisos no Resultado; a tarefa
gravada nunca e desfeita.
"""
from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta

import duckdb

from remanejamento.domain.equipe.repository import EquipeRepository
from remanejamento.domain.erros import EstadoInvalidoError, NaoEncontradoError, ValidacaoError
from remanejamento.domain.historico.entities import RegistroHistorico
from remanejamento.domain.historico.repository import HistoricoRepository
from remanejamento.domain.historico.value_objects import USUARIO_SISTEMA, Entidade, TipoAcao
from remanejamento.domain.remanejamento.entities import RemanejamentoFuncionario
from remanejamento.domain.remanejamento.repository import RemanejamentoRepository
from remanejamento.domain.resultado import Resultado
from remanejamento.domain.setor.services import resolver_setor
from remanejamento.domain.setor.value_objects import SetorCodigo
from remanejamento.domain.tarefa.entities import NovaTarefa, Tarefa
from remanejamento.domain.tarefa.prazo import PRAZO_PADRAO_HORAS, prazo_padrao
from remanejamento.domain.tarefa.repository import TarefaRepository
from remanejamento.domain.tarefa.value_objects import (
    STATUS_CONCLUIDOS,
    StatusTarefa,
    normalizar_prioridade,
    parse_status,
)
from remanejamento.log import log

from ._efeitos import tentar
from .setor_service import encontrar_equipe_por_setor
from .status_engine import StatusEngine

DIAS_MINIMOS_VENCIMENTO = 30


def _agora() -> datetime:
    return datetime.now(UTC)


def _dia_utc(valor: date) -> date:
    """Dia civil em UTC. datetime ingenuo e tratado como UTC."""
    if isinstance(valor, datetime):
        if valor.tzinfo is not None:
            valor = valor.astimezone(UTC)
        return valor.date()
    return valor


def _meio_dia_utc(valor: date) -> datetime:
    dia = _dia_utc(valor)
    return datetime(dia.year, dia.month, dia.day, 12, tzinfo=UTC)


class TarefaService:
    def __init__(
        self,
        remanejamento_repo: RemanejamentoRepository,
        tarefa_repo: TarefaRepository,
        historico_repo: HistoricoRepository,
        equipe_repo: EquipeRepository,
        status_engine: StatusEngine,
        *,
        prazo_horas: int = PRAZO_PADRAO_HORAS,
        dias_minimos_vencimento: int = DIAS_MINIMOS_VENCIMENTO,
        tentativas_efeitos: int = 1,
        relogio: Callable[[], datetime] = _agora,
    ) -> None:
        self._remanejamento_repo = remanejamento_repo
        self._tarefa_repo = tarefa_repo
        self._historico_repo = historico_repo
        self._equipe_repo = equipe_repo
        self._status_engine = status_engine
        self._prazo_horas = prazo_horas
        self._dias_minimos_vencimento = dias_minimos_vencimento
        self._tentativas = tentativas_efeitos
        self._relogio = relogio

    def criar_tarefa(self, nova: NovaTarefa, ator: str | None = None) -> Resultado[Tarefa]:
        """Valida, preenche defaults, grava e recalcula o status agregado.

        Raises:
            ValidacaoError: remanejamento_funcionario_id, tipo ou responsavel vazio.
            NaoEncontradoError: remanejamento inexistente.
            EstadoInvalidoError: prestserv em avaliacao ou concluido.
        """
        for campo in ("remanejamento_funcionario_id", "tipo", "responsavel"):
            if not (getattr(nova, campo) or "").strip():
                raise ValidacaoError(campo)

        rem = self._remanejamento_repo.buscar_por_id(nova.remanejamento_funcionario_id)
        if rem is None:
            raise NaoEncontradoError("RemanejamentoFuncionario", nova.remanejamento_funcionario_id)
        if not rem.aceita_novas_tarefas:
            raise EstadoInvalidoError(
                "Nao e possivel criar novas tarefas quando o prestserv esta em avaliacao ou concluido",
            )

        agora = self._relogio()
        tarefa = Tarefa(
            id=str(uuid.uuid4()),
            remanejamento_funcionario_id=rem.id,
            tipo=nova.tipo.strip(),
            descricao=nova.descricao,
            responsavel=nova.responsavel.strip(),
            status=StatusTarefa.PENDENTE,
            prioridade=normalizar_prioridade(nova.prioridade or rem.prioridade_solicitacao),
            data_criacao=agora,
            setor_id=encontrar_equipe_por_setor(resolver_setor(nova.responsavel), self._equipe_repo),
            data_limite=nova.data_limite or prazo_padrao(agora, rem.funcionario.data_admissao, self._prazo_horas),
            data_vencimento=nova.data_vencimento,
        )
        self._tarefa_repo.inserir(tarefa)

        avisos = tentar(
            lambda: self._historico_repo.registrar(RegistroHistorico(
                id=str(uuid.uuid4()),
                tipo_acao=TipoAcao.CRIACAO,
                entidade=Entidade.TAREFA,
                descricao_acao=(
                    f'Nova tarefa "{tarefa.tipo}" criada para '
                    f"{rem.funcionario.nome} ({rem.funcionario.matricula})"
                ),
                usuario_responsavel=ator or USUARIO_SISTEMA,
                data_acao=agora,
                solicitacao_id=rem.solicitacao_id,
                remanejamento_funcionario_id=rem.id,
                tarefa_id=tarefa.id,
                valor_novo=tarefa.status.value,
            )),
            f"historico de criacao da tarefa {tarefa.id}",
            self._tentativas,
        )
        avisos += self._recalcular(rem.id, ator)
        return Resultado(tarefa, tuple(avisos))

    def listar_tarefas(self, remanejamento_id: str, status: str | None = None) -> list[Tarefa]:
        """Tarefas nao canceladas, mais recentes primeiro."""
        filtro = self._parse_status(status) if status else None
        return self._tarefa_repo.listar_ativas(remanejamento_id, filtro)

    def atualizar_status_tarefa(
        self,
        tarefa_id: str,
        novo_status: str | StatusTarefa | None,
        ator: str | None = None,
        data_vencimento: date | None = None,
        data_limite: date | None = None,
    ) -> Resultado[Tarefa]:
        """Aprovacao, reprovacao, cancelamento, reabertura ou ajuste de datas.

        Datas informadas sao gravadas ao meio-dia UTC; None preserva o valor
        atual. Sem status, a tarefa mantem o status atual.

        Raises:
            ValidacaoError: nenhum campo informado ou status desconhecido.
            NaoEncontradoError: tarefa inexistente.
        """
        if novo_status is None and data_vencimento is None and data_limite is None:
            raise ValidacaoError("status", "Pelo menos um campo deve ser informado para atualizacao")
        if novo_status is None or isinstance(novo_status, StatusTarefa):
            informado = novo_status
        else:
            informado = self._parse_status(novo_status)
        tarefa = self._buscar(tarefa_id)
        status = informado or tarefa.status

        if status in STATUS_CONCLUIDOS:
            data_conclusao = tarefa.data_conclusao or self._relogio()
        else:
            data_conclusao = None
        atualizada = self._tarefa_repo.atualizar_status(
            tarefa.id,
            status,
            data_conclusao,
            _meio_dia_utc(data_vencimento) if data_vencimento else None,
            _meio_dia_utc(data_limite) if data_limite else None,
        )

        avisos: list[str] = []
        if tarefa.status != status:
            avisos += tentar(
                lambda: self._registrar_mudanca(tarefa, status, ator),
                f"historico de status da tarefa {tarefa.id}",
                self._tentativas,
            )
        avisos += self._recalcular(tarefa.remanejamento_funcionario_id, ator)
        return Resultado(atualizada, tuple(avisos))

    def concluir_tarefa(
        self,
        tarefa_id: str,
        data_vencimento: date | None = None,
        ator: str | None = None,
    ) -> Resultado[Tarefa]:
        """Conclui a tarefa. Fora do RH exige vencimento >= hoje + dias minimos."""
        tarefa = self._buscar(tarefa_id)
        if tarefa.setor != SetorCodigo.RH:
            if data_vencimento is None:
                raise ValidacaoError(
                    "data_vencimento",
                    "Data de vencimento e obrigatoria para concluir a tarefa (exceto RH)",
                )
            minimo = self._relogio().date() + timedelta(days=self._dias_minimos_vencimento)
            if _dia_utc(data_vencimento) < minimo:
                raise ValidacaoError(
                    "data_vencimento",
                    f"Data de vencimento deve ser pelo menos {self._dias_minimos_vencimento} dias apos hoje",
                )

        return self.atualizar_status_tarefa(tarefa.id, StatusTarefa.CONCLUIDO, ator, data_vencimento)

    def cancelar_tarefa(self, tarefa_id: str, ator: str | None = None) -> Resultado[Tarefa]:
        return self.atualizar_status_tarefa(tarefa_id, StatusTarefa.CANCELADO, ator)

    def _buscar(self, tarefa_id: str) -> Tarefa:
        tarefa = self._tarefa_repo.buscar_por_id(tarefa_id)
        if tarefa is None:
            raise NaoEncontradoError("Tarefa", tarefa_id)
        return tarefa

    def _parse_status(self, texto: str) -> StatusTarefa:
        try:
            return parse_status(texto)
        except ValueError as err:
            raise ValidacaoError("status", f"Status de tarefa invalido: {texto}") from err

    def _registrar_mudanca(self, tarefa: Tarefa, novo: StatusTarefa, ator: str | None) -> None:
        rem: RemanejamentoFuncionario | None = self._remanejamento_repo.buscar_por_id(
            tarefa.remanejamento_funcionario_id,
        )
        quem = f" para {rem.funcionario.nome} ({rem.funcionario.matricula})" if rem else ""
        self._historico_repo.registrar(RegistroHistorico(
            id=str(uuid.uuid4()),
            tipo_acao=TipoAcao.ATUALIZACAO_STATUS,
            entidade=Entidade.TAREFA,
            descricao_acao=(
                f'Status da tarefa "{tarefa.tipo}" alterado de {tarefa.status.value} '
                f"para {novo.value}{quem}"
            ),
            usuario_responsavel=ator or USUARIO_SISTEMA,
            data_acao=self._relogio(),
            solicitacao_id=rem.solicitacao_id if rem else None,
            remanejamento_funcionario_id=tarefa.remanejamento_funcionario_id,
            tarefa_id=tarefa.id,
            campo_alterado="status",
            valor_anterior=tarefa.status.value,
            valor_novo=novo.value,
        ))

    def _recalcular(self, remanejamento_id: str, ator: str | None) -> list[str]:
        """Recalculo e best effort para quem disparou a mutacao da tarefa."""
        try:
            resultado = self._status_engine.recalcular(remanejamento_id, ator)
        except duckdb.Error as err:
            aviso = f"recalculo de status de {remanejamento_id} falhou: {err}"
            log(aviso, "ERROR")
            return [aviso]
        return list(resultado.avisos)
