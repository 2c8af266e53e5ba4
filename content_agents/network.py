"""
Routing loop around the content creator agent.

The network re-runs the agent until the run state records completion. Unlike
an open-ended loop it is bounded: a maximum number of agent runs, the per-run
turn limit and a wall-clock timeout end the invocation as ABORTED unless
completion was already recorded.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

from agents import Agent, RunConfig
from agents.exceptions import MaxTurnsExceeded
from agents.items import TResponseInputItem
from pydantic import BaseModel

import content_agents.prompts as prompts
from configs.database import Database
from content_agents.state import ContentRunContext, RunState, WordCount
from runner.turns import TurnResult, run_agent_turn


logger = logging.getLogger(__name__)

TurnRunner = Callable[..., Awaitable[TurnResult]]


class LoopStatus(str, Enum):
    RUNNING = "running"
    STOPPED = "stopped"
    ABORTED = "aborted"


class NetworkOutcome(BaseModel):
    status: LoopStatus
    output: str = ""
    rounds: int = 0
    title: Optional[str] = None
    word_count: Optional[WordCount] = None
    summary: Optional[str] = None
    reason: Optional[str] = None


@dataclass
class _Progress:
    rounds: int = 0
    output: str = ""


def route(state: RunState, agent: Agent) -> Optional[Agent]:
    """Next agent to run: the content agent until completion is recorded, then none."""
    if state.completed:
        return None
    return agent


def user_message_input(text: str) -> list[TResponseInputItem]:
    return [
        {
            "type": "message",
            "role": "user",
            "content": [
                {
                    "type": "input_text",
                    "text": text,
                },
            ],
        }
    ]


class ContentNetwork:
    """Single-agent network gated on the run state's completion flag."""

    def __init__(
        self,
        agent: Agent,
        database: Database,
        run_config: RunConfig,
        max_rounds: int = 10,
        max_agent_turns: int = 30,
        timeout_seconds: float = 600.0,
        turn_runner: TurnRunner = run_agent_turn,
    ):
        self.agent = agent
        self.database = database
        self.run_config = run_config
        self.max_rounds = max_rounds
        self.max_agent_turns = max_agent_turns
        self.timeout_seconds = timeout_seconds
        self.turn_runner = turn_runner

    async def run(
        self,
        user_message: str,
        turn_runner: Optional[TurnRunner] = None,
        session_id: Optional[str] = None,
    ) -> NetworkOutcome:
        """
        Drive the agent until it signals completion or a bound is hit.

        Args:
            user_message: Natural-language content request
            turn_runner: Overrides the runner used for each agent run
            session_id: Session ID for logging

        Returns:
            NetworkOutcome with STOPPED or ABORTED status
        """
        context = ContentRunContext(database=self.database)
        progress = _Progress()
        runner = turn_runner or self.turn_runner

        logger.info("Network run started - session_id: %s", session_id)
        try:
            status, reason = await asyncio.wait_for(
                self._loop(user_message, context, progress, runner, session_id),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            if context.state.completed:
                status, reason = LoopStatus.STOPPED, None
            else:
                status = LoopStatus.ABORTED
                reason = f"Timed out after {self.timeout_seconds:g} seconds"

        if status is LoopStatus.ABORTED:
            logger.warning(
                "Network run aborted - session_id: %s, rounds: %d, reason: %s",
                session_id, progress.rounds, reason
            )
        else:
            logger.info(
                "Network run stopped - session_id: %s, rounds: %d",
                session_id, progress.rounds
            )

        state = context.state
        return NetworkOutcome(
            status=status,
            output=progress.output,
            rounds=progress.rounds,
            title=state.title,
            word_count=state.word_count,
            summary=state.summary,
            reason=reason,
        )

    async def _loop(
        self,
        user_message: str,
        context: ContentRunContext,
        progress: _Progress,
        runner: TurnRunner,
        session_id: Optional[str],
    ) -> tuple[LoopStatus, Optional[str]]:
        input_items = user_message_input(user_message)

        while True:
            next_agent = route(context.state, self.agent)
            if next_agent is None:
                return LoopStatus.STOPPED, None

            if progress.rounds >= self.max_rounds:
                return LoopStatus.ABORTED, f"No completion signal after {progress.rounds} agent runs"

            progress.rounds += 1
            logger.info(
                "Routing to %s - session_id: %s, round: %d",
                next_agent.name, session_id, progress.rounds
            )

            try:
                turn = await runner(
                    next_agent,
                    input_items,
                    context=context,
                    run_config=self.run_config,
                    max_turns=self.max_agent_turns,
                )
            except MaxTurnsExceeded as e:
                return LoopStatus.ABORTED, f"Agent exceeded {self.max_agent_turns} turns: {str(e)}"

            progress.output = str(turn.final_output) if turn.final_output is not None else ""
            input_items = turn.input_items
            if not context.state.completed:
                input_items = input_items + user_message_input(prompts.CONTINUE_INSTRUCTIONS)
