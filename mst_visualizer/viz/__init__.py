from .plotly_viz import STATUS_COLORS, build_plotly_figure, write_plotly_html

__all__ = [
    "STATUS_COLORS",
    "build_plotly_figure",
    "write_plotly_html",
]
