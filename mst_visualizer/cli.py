from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from .errors import MSTVisualizerError
from .graph import Graph
from .playback import speed_from_slider
from .spaces import GraphParams, build_random_circle_graph
from .steps import ALGORITHM_CHOICES, ALGORITHM_TITLES, generate
from .viz import write_plotly_html

log = logging.getLogger("mst_visualizer.cli")


def load_graph(path: str | Path) -> Graph:
    path = Path(path)
    return Graph.from_dict(json.loads(path.read_text(encoding="utf-8")))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="mst-visualizer", description="Step-by-step Prim's / Kruskal's MST visualizer")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_rand = sub.add_parser("random", help="Generate a random connected graph as JSON")
    p_rand.add_argument("--nodes", type=int, default=GraphParams.node_count, help="Number of nodes")
    p_rand.add_argument("--density", type=float, default=GraphParams.density, help="Edge density in [0, 1]")
    p_rand.add_argument("--min-weight", type=int, default=GraphParams.min_weight)
    p_rand.add_argument("--max-weight", type=int, default=GraphParams.max_weight)
    p_rand.add_argument("--seed", type=int, default=None, help="Random seed for reproducible graphs")
    p_rand.add_argument("--out", type=str, default="out/graph.json", help="Output JSON path")

    p_run = sub.add_parser("run", help="Generate algorithm steps for a graph and render them to HTML")
    p_run.add_argument("graph", type=str, help="Path to a graph .json file")
    p_run.add_argument("--algorithm", choices=ALGORITHM_CHOICES, default="prims", help="MST algorithm")
    p_run.add_argument("--out", type=str, default="out/steps.html", help="Output HTML path")
    p_run.add_argument("--json", type=str, default=None, help="Also write the step payload to this JSON path")
    p_run.add_argument("--speed", type=int, default=3, choices=range(1, 6), help="Playback speed, 1 (slow) to 5 (fast)")

    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        if args.cmd == "random":
            params = GraphParams(
                node_count=args.nodes,
                density=args.density,
                min_weight=args.min_weight,
                max_weight=args.max_weight,
            )
            graph = build_random_circle_graph(params, seed=args.seed)
            out = Path(args.out)
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(json.dumps(graph.to_dict(), indent=2), encoding="utf-8")
            print(f"Wrote random graph: {out} (nodes={len(graph)}, edges={len(graph.edges)})")
            return 0

        if args.cmd == "run":
            graph_path = Path(args.graph)
            graph = load_graph(graph_path)
            result = generate(graph, args.algorithm)
            out = write_plotly_html(
                graph,
                result,
                out_path=args.out,
                title=f"{ALGORITHM_TITLES[args.algorithm]} algorithm: {graph_path.name}",
                delay_s=speed_from_slider(args.speed),
            )
            if args.json:
                json_out = Path(args.json)
                json_out.parent.mkdir(parents=True, exist_ok=True)
                json_out.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
                print(f"Wrote step payload: {json_out}")
            names = ", ".join(
                f"{graph.label_of(e.source)}-{graph.label_of(e.target)}({e.weight})" for e in result.mst.edges
            )
            print(f"{ALGORITHM_TITLES[args.algorithm]}: steps={len(result)}, MST edges=[{names}], total weight={result.mst.total_weight}")
            if not result.mst.is_spanning(len(graph)):
                print(f"  graph is disconnected: {len(result.mst.edges)} of {len(graph) - 1} tree edges found")
            print(f"Wrote step visualization: {out}")
            return 0
    except (MSTVisualizerError, ValueError, KeyError, OSError) as e:
        log.error("%s", e)
        return 1

    raise AssertionError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
