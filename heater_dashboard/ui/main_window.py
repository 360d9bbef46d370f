from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMessageBox
)
from PyQt6.QtCore import QTimer, Qt
from PyQt6.QtGui import QFont
from ..core.collector import SampleCollector
from ..core.config import DashboardConfig
from ..core.exporter import DataExporter
from ..core.http_client import SampleFetcher
from .plot_widget import TemperatureChart
from .render_context import RenderContext
import asyncio
import logging
from datetime import datetime

logger = logging.getLogger(__name__)

# Chart scrolling cadence, independent of the poll interval
REDRAW_INTERVAL_MS = 100

class TemperatureDashboard(QMainWindow):
    def __init__(self, config: DashboardConfig, context: RenderContext,
                 fetcher: SampleFetcher = None):
        super().__init__()
        self.config = config
        self.setWindowTitle("Heater Temperature Monitor")
        self.resize(1200, 700)

        # --- UI layout
        heading = QLabel("Regin Heater Temperature Graph")
        heading.setFont(QFont("Segoe UI", 16, QFont.Weight.Bold))
        heading.setAlignment(Qt.AlignmentFlag.AlignCenter)

        # Top bar
        top_bar = QWidget()
        top_layout = QHBoxLayout(top_bar)

        self.btn_pause = QPushButton("⏸ Pause")
        self.btn_ClearPlot = QPushButton("Clear Plot")
        self.btn_export = QPushButton("💾 Export CSV")

        endpoint_label = QLabel(f"📡 {config.endpoint_url}")
        endpoint_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)

        # Status & Stats
        self.lbl_status = QLabel("Status: Idle")
        self.lbl_status.setFont(QFont("Segoe UI", 9, QFont.Weight.Bold))
        self.lbl_stats = QLabel("📈 0 samples")
        self.lbl_stats.setFont(QFont("Segoe UI", 9))

        top_layout.addWidget(self.btn_pause)
        top_layout.addWidget(self.btn_ClearPlot)
        top_layout.addWidget(self.btn_export)
        top_layout.addWidget(endpoint_label)
        top_layout.addStretch(1)
        top_layout.addWidget(self.lbl_status)
        top_layout.addWidget(self.lbl_stats)

        self.chart = TemperatureChart(context)

        root = QWidget()
        root_layout = QVBoxLayout(root)
        root_layout.addWidget(heading)
        root_layout.addWidget(top_bar)
        root_layout.addWidget(self.chart, 1)
        self.setCentralWidget(root)

        # --- data path
        self.fetcher = fetcher or SampleFetcher(config.endpoint_url, timeout=config.timeout)
        self.collector = SampleCollector(self.fetcher, self.chart.series)
        self.exporter = DataExporter()

        # --- signals
        self.btn_pause.clicked.connect(self.toggle_pause)
        self.btn_ClearPlot.clicked.connect(self.clear_plot)
        self.btn_export.clicked.connect(self.export_csv)

        # Poll timer
        self.poll_timer = QTimer(self)
        self.poll_timer.timeout.connect(lambda: asyncio.ensure_future(self.poll()))
        self.poll_timer.start(int(config.refresh_interval * 1000))

        # Redraw timer for the chart
        self.redraw_timer = QTimer(self)
        self.redraw_timer.timeout.connect(self.chart.refresh)
        self.redraw_timer.start(REDRAW_INTERVAL_MS)

        # Stats timer
        self.stats_timer = QTimer(self)
        self.stats_timer.timeout.connect(self.update_stats)
        self.stats_timer.start(1000)

        # first point without waiting a full interval
        QTimer.singleShot(0, lambda: asyncio.ensure_future(self.poll()))

    # ========== Data path ==========
    async def poll(self):
        failures = self.collector.failure_count
        sample = await self.collector.on_refresh()
        if sample is not None:
            at = datetime.fromtimestamp(sample.timestamp).strftime("%H:%M:%S")
            self.set_status(f"CPU {sample.cpu_temperature:.2f}°C, heater "
                            f"{sample.heater_temperature:.2f}°C @ {at}", "streaming")
        elif self.collector.failure_count > failures:
            self.set_status("⚠ No sample this cycle", "error")

    # ========== UI Management ==========
    def set_status(self, msg: str, status_type: str = "normal"):
        """Set status message with color coding

        Args:
            msg: Status message to display
            status_type: Type of status - "normal", "success", "streaming", "error"
        """
        self.lbl_status.setText(f"Status: {msg}")

        if status_type == "success":
            self.lbl_status.setStyleSheet("color: #00aa00; font-weight: bold;")  # Green
        elif status_type == "streaming":
            self.lbl_status.setStyleSheet("color: #0091D5; font-weight: bold;")  # Blue
        elif status_type == "error":
            self.lbl_status.setStyleSheet("color: #ff0000; font-weight: bold;")  # Red
        else:  # normal
            self.lbl_status.setStyleSheet("")

    def error(self, msg: str):
        self.set_status(f"❌ {msg}", "error")
        QMessageBox.critical(self, "Error", msg)

    def toggle_pause(self):
        paused = not self.chart.paused
        self.chart.set_paused(paused)
        self.btn_pause.setText("▶ Resume" if paused else "⏸ Pause")
        self.set_status("⏸ Paused" if paused else "▶ Resumed", "normal")

    def clear_plot(self):
        self.chart.reset()
        logger.info("Chart cleared")
        self.set_status("🧹 Plot cleared", "normal")

    def export_csv(self):
        try:
            filename = self.exporter.export_csv(self.chart.series)
        except OSError as e:
            logger.exception("CSV export failed")
            self.error(f"Export failed: {e}")
            return
        self.set_status(f"💾 Saved {filename}", "success")

    def update_stats(self):
        """Update statistics display"""
        stats = self.collector.get_stats()
        self.lbl_stats.setText(
            f"📈 {stats['success_count']} samples, {stats['failure_count']} failed"
            + (f", {stats['skipped_count']} skipped" if stats["skipped_count"] else "")
        )

    def closeEvent(self, event):
        self.poll_timer.stop()
        self.redraw_timer.stop()
        self.stats_timer.stop()
        super().closeEvent(event)
