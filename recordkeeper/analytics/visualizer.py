"""
Visualization helpers using Plotly.

Turns chat payloads into something the front-end can draw:
- sector distributions become pie or bar charts
- record lists become DataFrames for table display
"""
from typing import Any, Dict, List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from recordkeeper.core.logging_config import get_logger

logger = get_logger(__name__)

CHART_COLORS = ["#FF6384", "#36A2EB", "#FFCE56", "#4BC0C0", "#9966FF"]


class Visualizer:
    """Generates Plotly charts and tables from chat data."""

    @staticmethod
    def create_chart(
        distribution: Dict[str, int],
        chart_type: Optional[str] = "pie",
        title: str = "Records by Sector",
    ) -> Optional[go.Figure]:
        """
        Build a chart from a ``{label: count}`` mapping.

        Returns None when there is nothing to plot.
        """
        if not distribution:
            return None

        df = pd.DataFrame(
            {"sector": list(distribution.keys()), "count": list(distribution.values())}
        )

        if chart_type == "bar":
            fig = px.bar(
                df.sort_values(by="count", ascending=False),
                x="sector",
                y="count",
                title=title,
                color="sector",
                color_discrete_sequence=CHART_COLORS,
            )
        else:
            fig = px.pie(
                df,
                names="sector",
                values="count",
                title=title,
                color_discrete_sequence=CHART_COLORS,
            )

        fig.update_layout(legend={"orientation": "h", "y": -0.1})
        return fig

    @staticmethod
    def records_to_frame(records: List[Dict[str, Any]]) -> pd.DataFrame:
        """Records as a DataFrame with a stable column order."""
        columns = ["id", "name", "value"]
        if not records:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame(records, columns=columns)
