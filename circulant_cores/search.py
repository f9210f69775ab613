"""Tabu search for pairs of circulant cores.

The engine alternates two sweeps of the two-element swap neighbourhood, one
over sequence A and one over sequence B. Each sweep applies the best
admissible swap, where a swap is admissible when it is not tabu or when it
would beat the best objective of the current restart episode (aspiration).

Finding a solution never ends the run by itself: the solution is emitted and
the search restarts from a fresh random pair. The only regular way out is the
wall-clock budget, checked after every A+B sweep pair (or, optionally,
reaching SearchConfig.max_solutions).
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from tqdm import tqdm

from .config import SearchConfig
from .energy import core_objective, objective_from_profiles
from .rng import RandomStream
from .sequence import CoreSequence
from .tabu import TabuMemory


class SearchState(Enum):
    RESTART = "restart"
    SWEEP_A = "sweep_a"
    SWEEP_B = "sweep_b"
    HALT = "halt"


@dataclass
class Move:
    i1: int
    i2: int
    value: int


@dataclass
class SearchResult:
    """Outcome of SearchEngine.run().

    Solution pairs and their times are only kept when max_solutions bounds the
    run; otherwise they go to the sink and only the count and the last pair
    are retained.
    """

    solution_count: int = 0
    last_solution: Optional[tuple] = None
    solutions: list = field(default_factory=list)
    solution_times: list = field(default_factory=list)
    iterations: int = 0
    restarts: int = 0
    elapsed: float = 0.0
    best_objective: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.solution_count > 0


class SearchEngine:
    """Restarting tabu search over two +1/-1 sequences.

    Args:
        config: Run parameters
        rng: Random stream (default: seeded from config.seed)
        sink: Receives every solution via sink.emit(a, b, elapsed)
        clock: Wall-clock source in seconds
        verbose: Show a tqdm progress bar over restarts
    """

    def __init__(
        self,
        config: SearchConfig,
        rng: Optional[RandomStream] = None,
        sink=None,
        clock: Callable[[], float] = time.time,
        verbose: bool = False,
    ):
        self.config = config
        self.rng = rng if rng is not None else RandomStream(config.seed)
        self.sink = sink
        self.clock = clock
        self.verbose = verbose
        self.tenure = config.tabu_tenure

        self.tabu_a = TabuMemory(config.ell)
        self.tabu_b = TabuMemory(config.ell)
        self.a = None
        self.b = None

        # Never reset by a restart
        self.iteration = 1
        self.best_all = None
        self.current = None
        self.stagnation = 0
        self.start_time = None

        self.result = SearchResult()
        self._pbar = None

    def elapsed(self) -> float:
        return self.clock() - self.start_time

    def restart(self) -> None:
        """Begin a new episode from a fresh random pair."""
        ell = self.config.ell
        self.a = CoreSequence.random(ell, self.rng)
        self.b = CoreSequence.random(ell, self.rng)
        self.current = self.best_all = objective_from_profiles(
            self.a.profile, self.b.profile
        )
        self.stagnation = 0
        if not self.config.legacy_tabu:
            self.tabu_a.clear()
            self.tabu_b.clear()
        self.result.restarts += 1
        self._track_best(self.best_all)

        if self._pbar is not None:
            self._pbar.update(1)
            self._pbar.set_postfix(
                {
                    "best_F": self.result.best_objective,
                    "iter": self.iteration,
                    "solutions": self.result.solution_count,
                }
            )

    def select_move(
        self, core: CoreSequence, other: CoreSequence, tabu: TabuMemory
    ) -> Move:
        """Best admissible swap of core, first strictly lower in scan order.

        If every swap is tabu and none aspirates, the first best swap overall
        is returned so that the search always moves. With legacy_tabu any
        aspirating swap replaces the incumbent, even a lower one.
        """
        legacy = self.config.legacy_tabu
        values = core.values
        ell = len(values)
        best = None
        fallback = None
        for i1 in range(ell - 1):
            for i2 in range(i1 + 1, ell):
                if values[i1] == values[i2]:
                    continue
                value = core.objective_after_swap(other, i1, i2)
                if fallback is None or value < fallback.value:
                    fallback = Move(i1, i2, value)
                tabu_free = not tabu.is_tabu(i1, i2, self.iteration)
                lower = best is None or value < best.value
                aspirates = value < self.best_all
                if legacy:
                    chosen = (lower and tabu_free) or aspirates
                else:
                    chosen = lower and (tabu_free or aspirates)
                if chosen:
                    best = Move(i1, i2, value)
        return best if best is not None else fallback

    def sweep(self, core: CoreSequence, other: CoreSequence, tabu: TabuMemory) -> Move:
        """Select and apply one swap of core; returns the applied move."""
        move = self.select_move(core, other, tabu)
        core.swap(move.i1, move.i2)
        self.current = move.value

        if self.current < self.best_all:
            self.best_all = self.current
            self.stagnation = 0
            self._track_best(self.best_all)
        else:
            self.stagnation += 1

        if self.config.check_invariants:
            self._verify()

        if self.current != 0:
            tabu.set_tenure(move.i1, move.i2, self.iteration, self.tenure)
            self.iteration += 1
        return move

    def checkpoint(self) -> SearchState:
        """Decide what follows a completed A+B sweep pair."""
        if self.elapsed() > self.config.max_time:
            return SearchState.HALT
        if self.stagnation > self.config.idle_restart_threshold:
            return SearchState.RESTART
        return SearchState.SWEEP_A

    def run(self) -> SearchResult:
        """Search until the time budget (or max_solutions) is exhausted."""
        self.start_time = self.clock()
        if self.verbose:
            self._pbar = tqdm(desc="Restarts", unit="restart")

        state = SearchState.RESTART
        try:
            while state is not SearchState.HALT:
                if state is SearchState.RESTART:
                    self.restart()
                    state = SearchState.SWEEP_A
                elif state is SearchState.SWEEP_A:
                    state = self._step(self.a, self.b, self.tabu_a, SearchState.SWEEP_B)
                elif state is SearchState.SWEEP_B:
                    state = self._step(self.b, self.a, self.tabu_b, None)
        finally:
            if self._pbar is not None:
                self._pbar.close()
                self._pbar = None

        self.result.iterations = self.iteration
        self.result.elapsed = self.elapsed()
        return self.result

    def _step(self, core, other, tabu, next_state) -> SearchState:
        move = self.sweep(core, other, tabu)
        if move.value == 0:
            self._emit()
            return self._after_solution()
        if next_state is None:
            return self.checkpoint()
        return next_state

    def _after_solution(self) -> SearchState:
        max_solutions = self.config.max_solutions
        if max_solutions is not None and self.result.solution_count >= max_solutions:
            return SearchState.HALT
        return SearchState.RESTART

    def _emit(self) -> None:
        elapsed = self.elapsed()
        a = self.a.values.copy()
        b = self.b.values.copy()
        self.result.solution_count += 1
        self.result.last_solution = (a, b)
        if self.config.max_solutions is not None:
            self.result.solutions.append((a, b))
            self.result.solution_times.append(elapsed)
        if self.sink is not None:
            self.sink.emit(a, b, elapsed)
        if self._pbar is not None:
            self._pbar.set_description("Found solution")

    def _track_best(self, value: int) -> None:
        if self.result.best_objective is None or value < self.result.best_objective:
            self.result.best_objective = value

    def _verify(self) -> None:
        self.a.verify()
        self.b.verify()
        full = core_objective(self.a.values, self.b.values)
        assert self.current == full, (
            f"Incremental objective {self.current} != full objective {full}"
        )
