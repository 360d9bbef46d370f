import logging
from datetime import datetime
from typing import Sequence

import pandas as pd

from .data_buffer import SeriesBuffer

logger = logging.getLogger(__name__)

SERIES_COLUMNS = ("cpu_temp", "heater_temp")


class DataExporter:
    """Export the chart's temperature series to CSV files."""

    def to_frame(self, series: Sequence[SeriesBuffer]) -> pd.DataFrame:
        """Outer-join the series on timestamp, one column per metric."""
        frame = None
        for column, buf in zip(SERIES_COLUMNS, series):
            t, v = buf.to_numpy()
            part = pd.DataFrame({"timestamp": t, column: v})
            frame = part if frame is None else frame.merge(part, on="timestamp", how="outer")
        frame = frame.sort_values("timestamp", kind="stable").reset_index(drop=True)
        frame["timestamp"] = pd.to_datetime(frame["timestamp"], unit="s", utc=True)
        return frame

    def export_csv(self, series: Sequence[SeriesBuffer], filename: str = None) -> str:
        """Export data to CSV file."""
        if not filename:
            filename = f"heater_temps_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"

        df = self.to_frame(series)
        df.to_csv(filename, index=False)
        logger.info("[Export] Saved %d samples to %s", len(df), filename)
        return filename
