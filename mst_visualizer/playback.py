from __future__ import annotations

import logging
import time
from typing import Callable, Dict, List, Optional, Tuple

from .graph import EdgeId, EdgeStatus, Graph, NodeId
from .steps import ALGORITHM_TITLES, AlgorithmName, GenerationResult, generate
from .steps.types import PriorityQueueEntry, SortedEdgeEntry, Step

log = logging.getLogger(__name__)

DEFAULT_DELAY_S = 1.0


def speed_from_slider(value: int) -> float:
    """Map a 1 (slow) .. 5 (fast) slider position to seconds per step."""
    if not 1 <= value <= 5:
        raise ValueError(f"Speed must be between 1 and 5 (got {value!r})")
    return round(2.2 - 0.4 * value, 3)


class PlaybackController:
    """Cursor-driven replay of a generated step sequence.

    The controller owns a private copy of the graph whose edge statuses and
    side panels (visited set, queue, sorted edges, union-find components) are
    the result of applying steps 0..cursor-1 in order from the all-unvisited
    baseline. Steps are generated lazily on the first action that needs them
    and cached until the graph or algorithm changes.
    """

    def __init__(
        self,
        graph: Graph,
        algorithm: AlgorithmName = "prims",
        *,
        result: Optional[GenerationResult] = None,
    ) -> None:
        if result is not None and result.algorithm != algorithm:
            raise ValueError(f"Steps were generated for {result.algorithm!r}, not {algorithm!r}")
        self.algorithm: AlgorithmName = algorithm
        self.graph = graph.snapshot()
        self._result = result
        self.cursor = 0
        self.paused = False
        self._stopped = False
        self.show_answer_active = False
        self._clear_panels()
        self.explanation = 'Select an algorithm and press "Start" to begin.'

    def _clear_panels(self) -> None:
        self.visited_nodes: Tuple[NodeId, ...] = ()
        self.min_heap: Tuple[PriorityQueueEntry, ...] = ()
        self.sorted_edges: Tuple[SortedEdgeEntry, ...] = ()
        self.union_find: Tuple[Tuple[NodeId, ...], ...] = ()
        self.algorithm_step = ""

    @property
    def result(self) -> GenerationResult:
        if self._result is None:
            self._result = generate(self.graph, self.algorithm)
            log.debug("Generated %d %s steps", len(self._result), self.algorithm)
        return self._result

    @property
    def steps(self) -> Tuple[Step, ...]:
        return self.result.steps

    @property
    def is_finished(self) -> bool:
        return self.cursor >= len(self.steps)

    def reset(self) -> None:
        self.graph.reset_statuses()
        self._clear_panels()
        self.cursor = 0
        self.paused = False
        self._stopped = False
        self.show_answer_active = False
        self.explanation = 'Graph reset. Select an algorithm and press "Start" to begin.'

    def set_algorithm(self, algorithm: AlgorithmName) -> None:
        if algorithm not in ALGORITHM_TITLES:
            raise ValueError(f"Unknown algorithm {algorithm!r}")
        self.algorithm = algorithm
        self._result = None
        self.reset()

    def set_graph(self, graph: Graph) -> None:
        self.graph = graph.snapshot()
        self._result = None
        self.reset()

    def _apply(self, step: Step) -> None:
        self.explanation = step.explanation
        self.algorithm_step = step.algorithm_step
        if step.visited_nodes is not None:
            self.visited_nodes = step.visited_nodes
        if step.min_heap is not None:
            self.min_heap = step.min_heap
        if step.sorted_edges is not None:
            self.sorted_edges = step.sorted_edges
        if step.union_find is not None:
            self.union_find = step.union_find
        for update in step.edge_updates:
            self.graph.set_status(update.edge_id, update.status)

    def step(self) -> Optional[Step]:
        """Apply the step under the cursor and advance; None once finished."""
        if self.is_finished:
            return None
        current = self.steps[self.cursor]
        self._apply(current)
        self.cursor += 1
        return current

    def seek(self, index: int) -> None:
        """Materialize the state after the first `index` steps."""
        if not 0 <= index <= len(self.steps):
            raise IndexError(f"Step index {index} out of range 0..{len(self.steps)}")
        self.reset()
        for current in self.steps[:index]:
            self._apply(current)
        self.cursor = index

    def run_to_end(self) -> None:
        while self.step() is not None:
            pass

    def show_answer(self) -> None:
        mst_ids = set(self.result.mst.edge_ids())
        for eid in self.graph.edges:
            self.graph.set_status(eid, "included" if eid in mst_ids else "excluded")
        self.show_answer_active = True
        self.paused = False
        self.explanation = (
            f"MST found via {ALGORITHM_TITLES[self.algorithm]}. Total weight: {self.result.mst.total_weight}."
        )

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def stop(self) -> None:
        self._stopped = True

    def play(
        self,
        delay_s: float = DEFAULT_DELAY_S,
        *,
        on_step: Optional[Callable[[int, Step], None]] = None,
        should_continue: Optional[Callable[[], bool]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """Advance one step every `delay_s` seconds until the end, `stop()`,
        `pause()`, or `should_continue()` returning False. Returns the number
        of steps applied."""
        if delay_s < 0:
            raise ValueError("delay_s must be >= 0")
        self._stopped = False
        self.paused = False
        applied = 0
        while not self.is_finished:
            sleep(delay_s)
            if self._stopped or self.paused:
                break
            if should_continue is not None and not should_continue():
                break
            current = self.step()
            if current is None:
                break
            applied += 1
            if on_step is not None:
                on_step(self.cursor - 1, current)
        log.debug("Playback applied %d steps (cursor=%d/%d)", applied, self.cursor, len(self.steps))
        return applied

    def edge_statuses(self) -> Dict[EdgeId, EdgeStatus]:
        return {eid: e.status for eid, e in self.graph.edges.items()}

    def included_edges(self) -> List[EdgeId]:
        return [eid for eid, e in self.graph.edges.items() if e.status == "included"]
