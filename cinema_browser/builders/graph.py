from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd
import plotly.graph_objs as go

logger = logging.getLogger(__name__)

LINEAR = "linear"
LOG10 = "log10"


def _pair(value: Any, default: Any = None) -> List[Any]:
    items = list(value) if isinstance(value, (list, tuple)) else []
    items += [default] * (2 - len(items))
    return items[:2]


class Graph(ABC):
    """
    Abstract 2D graph of one or more datasets, rendered as a plotly figure.

    Arguments (from a simple-plot-2d structure):
    - scales: [x, y], each 'linear' or 'log10'
    - ranges: [x, y], fixed [min, max] per axis or null to fit the data
    - labels / units: axis titles
    """

    def __init__(self, args: Dict[str, Any]) -> None:
        self.ranges = _pair(args.get("ranges"))
        self.labels = _pair(args.get("labels"), "")
        self.units = _pair(args.get("units"), "")

        scales = _pair(args.get("scales"), LINEAR)
        self.log_x = self._is_log(scales[0], "X")
        self.log_y = self._is_log(scales[1], "Y")

        self.datasets: List[pd.DataFrame] = []
        self.domains: List[Optional[Sequence[float]]] = list(self.ranges)
        self.figure = go.Figure()
        self.redraw_data()

    @staticmethod
    def _is_log(scale: Any, axis: str) -> bool:
        if scale == LOG10:
            return True
        if scale != LINEAR:
            logger.warning(
                "Unrecognized %s-Axis scale type %s, must be either 'linear' or 'log10'. "
                "Defaulting to linear",
                axis,
                scale,
            )
        return False

    @staticmethod
    def _extent(values: List[np.ndarray], log: bool) -> List[float]:
        # The extent always includes 0
        combined = np.concatenate([np.array([0.0])] + values)
        combined = combined[np.isfinite(combined)]
        lo, hi = float(combined.min()), float(combined.max())
        if log and lo <= 0 <= hi:
            if lo < 0:
                hi = -0.001
            elif lo == 0:
                lo = 0.001
        return [lo, hi]

    def set_data(self, datasets: List[pd.DataFrame]) -> None:
        """Set the datasets (frames with 'x' and 'y' columns) and redraw."""
        self.datasets = datasets

        if not self.ranges[0]:
            self.domains[0] = self._extent([d["x"].to_numpy(dtype=float) for d in datasets], self.log_x)
        if not self.ranges[1]:
            self.domains[1] = self._extent([d["y"].to_numpy(dtype=float) for d in datasets], self.log_y)

        self.redraw_data()

    def _axis(self, index: int, log: bool) -> Dict[str, Any]:
        label, unit = self.labels[index], self.units[index]
        axis: Dict[str, Any] = {
            "title": {"text": f"{label} ({unit})" if unit else str(label)},
            "type": "log" if log else "linear",
        }
        domain = self.domains[index]
        if domain:
            lo, hi = float(domain[0]), float(domain[1])
            if not log:
                axis["range"] = [lo, hi]
            elif lo > 0 and hi > 0:
                axis["range"] = [float(np.log10(lo)), float(np.log10(hi))]
        return axis

    def redraw_data(self) -> None:
        fig = go.Figure(data=[self.trace(d) for d in self.datasets])
        fig.update_layout(
            xaxis=self._axis(0, self.log_x),
            yaxis=self._axis(1, self.log_y),
            showlegend=False,
            margin=dict(l=75, r=10, t=10, b=35),
        )
        self.figure = fig

    @abstractmethod
    def trace(self, dataset: pd.DataFrame) -> go.Scatter:
        raise NotImplementedError()


class LineGraph(Graph):
    """One line per dataset."""

    def trace(self, dataset: pd.DataFrame) -> go.Scatter:
        return go.Scatter(x=dataset["x"], y=dataset["y"], mode="lines")


class ScatterGraph(Graph):
    """A collection of dots per dataset."""

    def trace(self, dataset: pd.DataFrame) -> go.Scatter:
        return go.Scatter(x=dataset["x"], y=dataset["y"], mode="markers", marker=dict(size=2))
