"""Signal collector turning raw benchmark fields into weighted observations."""

import logging

from crossbench.models.common import clamp
from crossbench.models.model_config import SignalConfig, SignalSource
from crossbench.models.model_entity import Signal
from crossbench.models.model_record import RawModelRecord

logger = logging.getLogger(__name__)


def make_signal(source: SignalSource, value: float) -> Signal | None:
    """Build an observation from a parsed value.

    Out-of-range values are clamped into [0,1]. Non-positive values carry no
    evidence and yield None rather than a zero-score observation.
    """
    if value <= 0.0:
        return None
    return Signal(source=source.label, score=clamp(value, 0.0, 1.0), weight=source.weight)


class SignalCollector:
    """Collects at most one observation per configured fallback chain.

    Within a chain, sources are tried in order and the first one producing a
    positive score wins; later sources in the chain are ignored. With the
    default table this means the GPQA score is used when present and the
    average score only as a fallback.
    """

    def __init__(self, config: SignalConfig | None = None) -> None:
        self.config = config or SignalConfig()

    def collect(self, record: RawModelRecord) -> tuple[Signal, ...]:
        """Collect weighted observations from a raw record.

        Args:
            record: Validated raw record

        Returns:
            Immutable, ordered tuple of signals (possibly empty)
        """
        signals: list[Signal] = []
        for chain in self.config.chains:
            signal = self._collect_chain(record, chain)
            if signal is not None:
                signals.append(signal)
        return tuple(signals)

    def _collect_chain(self, record: RawModelRecord, chain: list[SignalSource]) -> Signal | None:
        for source in chain:
            value = record.get_float(source.field)
            if value is None:
                continue
            signal = make_signal(source, value)
            if signal is None:
                logger.debug(f"{record.name}: discarded non-positive {source.field}={value}")
                continue
            return signal
        return None
