"""Typing session state machine.

A :class:`Session` is an immutable snapshot of one attempt. :func:`apply`
takes a snapshot and one input event and returns the next snapshot together
with the side effects the caller must carry out (start or stop the stopwatch,
save a new high score, quit). The state machine itself performs no I/O and
never raises for out-of-phase input; such events leave the session unchanged.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union

from typesprint.core.scorer import evaluate_highscore

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Character:
    char: str


@dataclass(frozen=True)
class Erase:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Restart:
    """Start over with ``target``. Only honoured once the run is complete."""

    target: str


@dataclass(frozen=True)
class TimerTick:
    pass


Event = Union[Character, Erase, Quit, Restart, TimerTick]


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------

class Effect(enum.Enum):
    START_TIMER = "start_timer"
    STOP_TIMER = "stop_timer"
    QUIT = "quit"


@dataclass(frozen=True)
class SaveHighscore:
    seconds: float


SideEffect = Union[Effect, SaveHighscore]


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Session:
    target: str
    position: int = 0
    error_mark: Optional[int] = None
    timer_running: bool = False
    finalized: bool = False
    history: Tuple[float, ...] = field(default_factory=tuple)
    highscore: Optional[float] = None

    @classmethod
    def new(
        cls,
        target: str,
        history: Tuple[float, ...] = (),
        highscore: Optional[float] = None,
    ) -> "Session":
        """Idle session for ``target`` carrying over earlier results."""
        return cls(target=target, history=tuple(history), highscore=highscore)

    @property
    def at_end(self) -> bool:
        return self.position == len(self.target)

    @property
    def has_error(self) -> bool:
        return self.error_mark is not None

    @property
    def is_complete(self) -> bool:
        return self.at_end and not self.has_error


@dataclass(frozen=True)
class Transition:
    session: Session
    effects: Tuple[SideEffect, ...] = ()


def apply(session: Session, event: Event, elapsed: float = 0.0) -> Transition:
    """Process one event.

    ``elapsed`` is the stopwatch reading when the event was delivered; it is
    only read when a completed run is being finalized.
    """
    if isinstance(event, Quit):
        return Transition(session, (Effect.QUIT,))

    if session.is_complete:
        if isinstance(event, Restart):
            return _restart(session, event, elapsed)
        return _finalize(session, elapsed)

    if isinstance(event, Character):
        return _type_char(session, event.char)
    if isinstance(event, Erase):
        return Transition(_erase(session))
    # Restart before completion, ticks and anything unknown.
    return Transition(session)


def _type_char(session: Session, char: str) -> Transition:
    if session.at_end:
        return Transition(session)

    effects: Tuple[SideEffect, ...] = ()
    if not session.timer_running:
        effects = (Effect.START_TIMER,)

    error_mark = session.error_mark
    if error_mark is None and char != session.target[session.position]:
        error_mark = session.position

    return Transition(
        replace(
            session,
            position=session.position + 1,
            error_mark=error_mark,
            timer_running=True,
        ),
        effects,
    )


def _erase(session: Session) -> Session:
    if session.position == 0:
        return session
    position = session.position - 1
    error_mark = session.error_mark
    if error_mark is not None and position <= error_mark:
        error_mark = None
    return replace(session, position=position, error_mark=error_mark)


def _finalize(session: Session, elapsed: float) -> Transition:
    """Record a completed run. Runs at most once per session."""
    if session.finalized or not session.timer_running:
        return Transition(session)

    decision = evaluate_highscore(elapsed, session.highscore)
    effects: Tuple[SideEffect, ...] = (Effect.STOP_TIMER,)
    if decision.changed:
        effects += (SaveHighscore(decision.highscore),)
        logger.info("New high score: %.3fs", decision.highscore)
    logger.info("Run finished in %.3fs", elapsed)

    finished = replace(
        session,
        timer_running=False,
        finalized=True,
        history=session.history + (elapsed,),
        highscore=decision.highscore,
    )
    return Transition(finished, effects)


def _restart(session: Session, event: Restart, elapsed: float) -> Transition:
    # A restart that arrives before the run was recorded records it first.
    finished = _finalize(session, elapsed)
    fresh = Session.new(
        event.target,
        history=finished.session.history,
        highscore=finished.session.highscore,
    )
    return Transition(fresh, finished.effects)
