import pandas as pd

from heater_dashboard.core.data_buffer import SeriesBuffer
from heater_dashboard.core.exporter import DataExporter


def make_series():
    cpu, heater = SeriesBuffer(), SeriesBuffer()
    for i, t in enumerate((1_700_000_000.0, 1_700_000_010.0)):
        cpu.append(t, 40.0 + i)
        heater.append(t, 30.0 + i)
    return cpu, heater


def test_to_frame_joins_on_timestamp():
    df = DataExporter().to_frame(make_series())

    assert list(df.columns) == ["timestamp", "cpu_temp", "heater_temp"]
    assert df["cpu_temp"].tolist() == [40.0, 41.0]
    assert df["heater_temp"].tolist() == [30.0, 31.0]
    assert df["timestamp"].iloc[0] == pd.Timestamp(1_700_000_000, unit="s", tz="UTC")


def test_export_csv(tmp_path):
    path = tmp_path / "temps.csv"

    filename = DataExporter().export_csv(make_series(), str(path))

    assert filename == str(path)
    df = pd.read_csv(path)
    assert len(df) == 2
    assert df["heater_temp"].tolist() == [30.0, 31.0]


def test_export_empty_series(tmp_path):
    path = tmp_path / "empty.csv"

    DataExporter().export_csv((SeriesBuffer(), SeriesBuffer()), str(path))

    assert pd.read_csv(path).empty
