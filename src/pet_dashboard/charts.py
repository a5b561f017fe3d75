from __future__ import annotations
from typing import Dict, Iterable, Optional

import plotly.graph_objects as go

from .models import AnimalRecord
from .presentation import age_group_counts


class ChartBuilder:
    """Builds the dashboard's plotly figures and renders them as embeddable HTML fragments."""

    def __init__(self, include_plotlyjs: str = "cdn") -> None:
        self.include_plotlyjs = include_plotlyjs

    def type_distribution_figure(self, type_counts: Dict[Optional[str], int]) -> go.Figure:
        """Pie chart of how many listings there are per animal type."""
        labels = [str(t) if t is not None else "Unknown" for t in type_counts]
        fig = go.Figure(
            data=[go.Pie(labels=labels, values=list(type_counts.values()), sort=False)]
        )
        fig.update_layout(title_text="Type Distribution", margin=dict(t=40, b=10, l=10, r=10))
        return fig

    def age_group_figure(self, records: Iterable[AnimalRecord]) -> go.Figure:
        """Bar histogram over the four fixed age labels."""
        counts = age_group_counts(records)
        fig = go.Figure(data=[go.Bar(x=list(counts), y=list(counts.values()))])
        fig.update_layout(
            title_text="Age Groups",
            xaxis_title="Age group",
            yaxis_title="Pets",
            margin=dict(t=40, b=40, l=40, r=10),
        )
        return fig

    def to_html(self, fig: go.Figure, div_id: str, with_plotlyjs: bool = True) -> str:
        """Fragment for `fig`; only one fragment per page should carry plotly.js."""
        include = self.include_plotlyjs if with_plotlyjs else False
        return fig.to_html(full_html=False, include_plotlyjs=include, div_id=div_id)

    def type_distribution_chart(self, type_counts: Dict[Optional[str], int]) -> str:
        return self.to_html(self.type_distribution_figure(type_counts), "type-chart")

    def age_group_chart(self, records: Iterable[AnimalRecord]) -> str:
        # the type chart already pulled plotly.js in
        return self.to_html(self.age_group_figure(records), "age-chart", with_plotlyjs=False)
