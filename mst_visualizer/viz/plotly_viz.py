from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from ..graph import EdgeStatus, Graph
from ..playback import DEFAULT_DELAY_S, PlaybackController
from ..steps import ALGORITHM_TITLES, GenerationResult


STATUS_COLORS: Dict[EdgeStatus, str] = {
    "unvisited": "#9ca3af",  # gray
    "candidate": "#f59e0b",  # amber
    "included": "#10b981",  # green
    "excluded": "#ef4444",  # red
}

STATUS_WIDTHS: Dict[EdgeStatus, float] = {
    "unvisited": 1.5,
    "candidate": 3.0,
    "included": 5.0,
    "excluded": 1.5,
}

_NODE_IDLE = "#94a3b8"
_NODE_VISITED = "#3b82f6"


def _frame_traces(controller: PlaybackController):
    import plotly.graph_objects as go

    graph = controller.graph
    traces = []

    # One line trace per status keeps the frame trace count fixed.
    for status, color in STATUS_COLORS.items():
        ex: List[Optional[float]] = []
        ey: List[Optional[float]] = []
        for e in graph.edges.values():
            if e.status != status:
                continue
            a, b = graph.nodes[e.source], graph.nodes[e.target]
            ex += [a.x, b.x, None]
            ey += [a.y, b.y, None]
        traces.append(
            go.Scatter(
                x=ex,
                y=ey,
                mode="lines",
                line=dict(width=STATUS_WIDTHS[status], color=color),
                hoverinfo="none",
                name=status,
            )
        )

    # Edge weights at midpoints.
    wx, wy, wtext = [], [], []
    for e in graph.edges.values():
        a, b = graph.nodes[e.source], graph.nodes[e.target]
        wx.append((a.x + b.x) / 2.0)
        wy.append((a.y + b.y) / 2.0)
        wtext.append(str(e.weight))
    traces.append(
        go.Scatter(
            x=wx,
            y=wy,
            mode="text",
            text=wtext,
            textfont=dict(size=11, color="#111827"),
            hoverinfo="none",
            showlegend=False,
        )
    )

    visited = set(controller.visited_nodes)
    in_tree = {n for comp in controller.union_find if len(comp) > 1 for n in comp}
    nx, ny, ntext, ncolor, hover = [], [], [], [], []
    for node in graph.nodes.values():
        nx.append(node.x)
        ny.append(node.y)
        ntext.append(node.label)
        ncolor.append(_NODE_VISITED if node.id in visited or node.id in in_tree else _NODE_IDLE)
        hover.append(f"id={node.id}<br>label={node.label}")
    traces.append(
        go.Scatter(
            x=nx,
            y=ny,
            mode="markers+text",
            marker=dict(size=26, color=ncolor, line=dict(width=1, color="#1f2937")),
            text=ntext,
            textfont=dict(color="white"),
            hovertext=hover,
            hoverinfo="text",
            name="nodes",
        )
    )
    return traces


def build_plotly_figure(
    graph: Graph,
    result: GenerationResult,
    *,
    title: Optional[str] = None,
    delay_s: float = DEFAULT_DELAY_S,
):
    """Animated figure with one frame per step: play/pause buttons run the
    steps at `delay_s` per frame and the slider scrubs to any step."""
    import plotly.graph_objects as go

    algo_title = ALGORITHM_TITLES[result.algorithm]
    title = title or f"{algo_title} algorithm"

    controller = PlaybackController(graph, result.algorithm, result=result)

    frame_ms = int(delay_s * 1000)
    frames = []
    slider_steps = []
    for i in range(len(result.steps) + 1):
        if i > 0:
            controller.step()
        if i == 0:
            caption = "Initial graph"
        else:
            caption = f"Step {i}/{len(result.steps)}: {controller.explanation}"
        name = str(i)
        frames.append(
            go.Frame(
                data=_frame_traces(controller),
                name=name,
                layout=go.Layout(title=dict(text=f"{title}<br><sup>{caption}</sup>")),
            )
        )
        slider_steps.append(
            dict(
                method="animate",
                label=name,
                args=[[name], dict(mode="immediate", frame=dict(duration=0, redraw=True), transition=dict(duration=0))],
            )
        )

    fig = go.Figure(data=frames[0].data, frames=frames)
    fig.update_layout(
        title=dict(text=f"{title}<br><sup>MST total weight: {result.mst.total_weight}</sup>"),
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, scaleanchor="x", scaleratio=1, autorange="reversed"),
        margin=dict(l=0, r=0, t=80, b=0),
        updatemenus=[
            dict(
                type="buttons",
                showactive=False,
                x=0.0,
                y=0.0,
                xanchor="left",
                yanchor="top",
                buttons=[
                    dict(
                        label="Play",
                        method="animate",
                        args=[None, dict(frame=dict(duration=frame_ms, redraw=True), fromcurrent=True)],
                    ),
                    dict(
                        label="Pause",
                        method="animate",
                        args=[[None], dict(mode="immediate", frame=dict(duration=0, redraw=False))],
                    ),
                ],
            )
        ],
        sliders=[dict(active=0, currentvalue=dict(prefix="Step "), pad=dict(t=40), steps=slider_steps)],
    )
    return fig


def write_plotly_html(
    graph: Graph,
    result: GenerationResult,
    *,
    out_path: str | Path,
    title: Optional[str] = None,
    delay_s: float = DEFAULT_DELAY_S,
) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig = build_plotly_figure(graph, result, title=title, delay_s=delay_s)
    fig.write_html(str(out_path), include_plotlyjs="cdn", full_html=True)
    return out_path
