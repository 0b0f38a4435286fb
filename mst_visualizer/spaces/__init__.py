from .circle import GraphParams, build_random_circle_graph, circle_radius

__all__ = [
    "GraphParams",
    "build_random_circle_graph",
    "circle_radius",
]
