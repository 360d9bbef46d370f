import time
from typing import Optional

from PyQt6.QtWidgets import QWidget, QVBoxLayout

from ..core.data_buffer import SeriesBuffer
from .render_context import RenderContext

class TemperatureChart(QWidget):
    """Scrolling realtime chart of the CPU and heater temperature series."""
    def __init__(self, context: RenderContext):
        super().__init__()
        self.context = context
        layout = QVBoxLayout(self)
        self.plot = context.build_plot()
        layout.addWidget(self.plot)
        self.series = tuple(SeriesBuffer(maxlen=context.maxlen) for _ in context.series)
        self.curves = [
            self.plot.plot(pen=context.pen(i), name=style.label, antialias=context.antialias)
            for i, style in enumerate(context.series)
        ]
        self.paused = False
        self.refresh()

    def refresh(self, now: Optional[float] = None):
        """Scroll the window to `now` and redraw. Does nothing while paused."""
        if self.paused:
            return
        left, right = self.context.x_range(time.time() if now is None else now)
        for buf, curve in zip(self.series, self.curves):
            buf.trim_before(left)
            if len(buf):
                curve.setData(*buf.to_numpy())
            else:
                curve.clear()
        self.plot.setXRange(left, right, padding=0)

    def set_paused(self, paused: bool):
        self.paused = paused

    def reset(self):
        """Clear all series"""
        for buf, curve in zip(self.series, self.curves):
            buf.clear()
            curve.clear()
