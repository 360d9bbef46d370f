"""
Chart setup shared by the dashboard widgets.

Built once in main() and handed to the widgets that draw, instead of
setting pyqtgraph's process-wide config options.
"""
from dataclasses import dataclass
from typing import Tuple

import pyqtgraph as pg

from ..core.config import DashboardConfig


@dataclass(frozen=True)
class SeriesStyle:
    label: str
    color: str


DEFAULT_SERIES = (
    SeriesStyle("CPU temperature", "#0091D5"),
    SeriesStyle("Heater temperature", "#EA6A47"),
)


@dataclass(frozen=True)
class RenderContext:
    duration: float
    delay: float
    y_range: Tuple[float, float]
    series: Tuple[SeriesStyle, ...] = DEFAULT_SERIES
    background: str = "w"
    foreground: str = "k"
    antialias: bool = True
    line_width: float = 2.0
    maxlen: int = 2000

    @classmethod
    def from_config(cls, config: DashboardConfig) -> "RenderContext":
        # enough room for one window of points plus slack
        maxlen = max(2000, int(config.duration / config.refresh_interval) * 2)
        return cls(
            duration=config.duration,
            delay=config.delay,
            y_range=(config.y_min, config.y_max),
            maxlen=maxlen,
        )

    def x_range(self, now: float) -> Tuple[float, float]:
        """Visible window in Unix seconds at time `now`."""
        right = now - self.delay
        return right - self.duration, right

    def pen(self, index: int):
        return pg.mkPen(self.series[index].color, width=self.line_width)

    def build_plot(self, title: str = "") -> pg.PlotWidget:
        plot = pg.PlotWidget(title=title, axisItems={"bottom": pg.DateAxisItem(orientation="bottom")})
        plot.setBackground(self.background)
        for name in ("left", "bottom"):
            axis = plot.getAxis(name)
            axis.setPen(self.foreground)
            axis.setTextPen(self.foreground)
        plot.setLabel("left", "Temperature (°C)")
        plot.showGrid(x=True, y=True, alpha=0.3)
        plot.setYRange(*self.y_range, padding=0)
        plot.setMouseEnabled(x=False, y=False)
        plot.addLegend()
        return plot
