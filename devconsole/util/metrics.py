"""Frame time statistics for the ``show.fps`` readout."""

import numpy as np

from devconsole import config


class FrameTimeStats:
    """Track the most recent N frame times in a ring buffer."""

    def __init__(self, num_samples: int = config.FPS_SAMPLE_SIZE) -> None:
        if num_samples < 1:
            raise ValueError("num_samples must be at least 1")
        self.num_samples = num_samples
        self.samples = np.zeros(num_samples, dtype=np.float64)
        self.count = 0
        self.write_index = 0

    def record(self, delta_time: float) -> None:
        """Record the duration of one frame, in seconds."""
        self.samples[self.write_index] = max(0.0, delta_time)
        self.write_index = (self.write_index + 1) % self.num_samples
        self.count += 1

    def reset(self) -> None:
        self.samples.fill(0.0)
        self.count = 0
        self.write_index = 0

    def _get_valid_samples(self) -> np.ndarray:
        if self.count <= self.num_samples:
            # Haven't wrapped yet
            return self.samples[: self.count]
        return np.concatenate(
            [self.samples[self.write_index :], self.samples[: self.write_index]]
        )

    @property
    def sample_count(self) -> int:
        return min(self.count, self.num_samples)

    @property
    def last_fps(self) -> float:
        """The FPS of the most recent frame."""
        if self.count == 0:
            return 0.0
        last = self.samples[(self.write_index - 1) % self.num_samples]
        return 0.0 if last == 0 else float(1.0 / last)

    @property
    def mean_fps(self) -> float:
        """The FPS over all sampled frames."""
        valid = self._get_valid_samples()
        if len(valid) == 0:
            return 0.0
        mean = float(np.mean(valid))
        return 0.0 if mean == 0 else 1.0 / mean

    def frame_time_percentiles_ms(self) -> tuple[float, float, float]:
        """Return (p50, p95, p99) frame times in milliseconds."""
        valid = self._get_valid_samples()
        if len(valid) == 0:
            return (0.0, 0.0, 0.0)
        p50, p95, p99 = np.percentile(valid * 1000.0, [50, 95, 99])
        return (float(p50), float(p95), float(p99))
