import numpy as np

from heater_dashboard.core.data_buffer import SeriesBuffer


def test_append_and_to_numpy():
    buf = SeriesBuffer()
    buf.append(1.0, 20.0)
    buf.append(2.0, 21.5)

    t, v = buf.to_numpy()

    np.testing.assert_array_equal(t, [1.0, 2.0])
    np.testing.assert_array_equal(v, [20.0, 21.5])


def test_maxlen_drops_oldest():
    buf = SeriesBuffer(maxlen=3)
    for i in range(5):
        buf.append(float(i), float(i * 10))

    assert list(buf.time) == [2.0, 3.0, 4.0]
    assert list(buf.values) == [20.0, 30.0, 40.0]


def test_trim_before():
    buf = SeriesBuffer()
    for t in (10.0, 20.0, 30.0, 40.0):
        buf.append(t, t)

    assert buf.trim_before(30.0) == 2
    assert list(buf.time) == [30.0, 40.0]
    assert buf.trim_before(0.0) == 0


def test_clear_and_empty_numpy():
    buf = SeriesBuffer()
    buf.append(1.0, 1.0)
    buf.clear()

    t, v = buf.to_numpy()
    assert len(buf) == 0
    assert t.size == 0 and v.size == 0
