"""Amplitude analysis of extracted channel buffers."""

from collections.abc import Sequence

from ..core.models import ChannelMetrics

DEFAULT_SILENCE_THRESHOLD = 50

# (upper bound of peak amplitude, label)
ACTIVITY_LEVELS = (
    (50, "silent"),
    (500, "very_quiet"),
    (2000, "quiet"),
    (8000, "normal"),
    (20000, "loud"),
)


def activity_level(max_amplitude: int) -> str:
    """Classify a channel by its peak amplitude."""
    for upper_bound, label in ACTIVITY_LEVELS:
        if max_amplitude < upper_bound:
            return label
    return "very_loud"


def analyze_channel(
    samples: Sequence[int], silence_threshold: int = DEFAULT_SILENCE_THRESHOLD
) -> ChannelMetrics:
    """Analyze a single channel's audio characteristics."""
    if not samples:
        return ChannelMetrics()

    abs_samples = [abs(s) for s in samples]
    max_amp = max(abs_samples)
    avg_amp = sum(abs_samples) / len(abs_samples)
    rms_amp = (sum(s * s for s in samples) / len(samples)) ** 0.5

    return ChannelMetrics(
        sample_count=len(samples),
        max_amplitude=max_amp,
        avg_amplitude=avg_amp,
        rms_amplitude=rms_amp,
        is_silent=max_amp < silence_threshold,
        activity_level=activity_level(max_amp),
    )
