import numpy as np
from collections import deque

class SeriesBuffer:
    """Time-stamped ring buffer for one chart series."""
    def __init__(self, maxlen=2000):
        self.time = deque(maxlen=maxlen)
        self.values = deque(maxlen=maxlen)

    def __len__(self):
        return len(self.time)

    def append(self, t: float, v: float):
        self.time.append(t)
        self.values.append(v)

    def trim_before(self, t: float) -> int:
        """Drop points older than `t`. Returns how many were dropped."""
        dropped = 0
        while self.time and self.time[0] < t:
            self.time.popleft()
            self.values.popleft()
            dropped += 1
        return dropped

    def clear(self):
        self.time.clear()
        self.values.clear()

    def to_numpy(self):
        return np.fromiter(self.time, float), np.fromiter(self.values, float)
