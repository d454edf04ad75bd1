"""
OpenTelemetry instruments for sampling activity.

Counts are recorded through the metrics API only. Without an SDK meter
provider installed they are no-ops; pass a provider to SamplingContext (or
install one globally) to export them.
"""

from opentelemetry import metrics
from opentelemetry.metrics import MeterProvider

from . import __version__

VARIATES_COUNTER = "randomdist.variates"
REJECTIONS_COUNTER = "randomdist.rejections"


class SamplerMetrics:
    """Counters for produced variates and rejected candidates."""

    def __init__(self, meter_provider: MeterProvider | None = None):
        if meter_provider is None:
            self.meter = metrics.get_meter(__name__, __version__)
        else:
            self.meter = meter_provider.get_meter(__name__, __version__)
        self._setup_instruments()

    def _setup_instruments(self) -> None:
        self.variates = self.meter.create_counter(
            VARIATES_COUNTER,
            description="Count of variates produced",
            unit="1",
        )
        self.rejections = self.meter.create_counter(
            REJECTIONS_COUNTER,
            description="Count of candidates rejected by rejection loops",
            unit="1",
        )

    def record_variate(self, distribution: str, numeric: str) -> None:
        self.variates.add(1, {"distribution": distribution, "numeric": numeric})

    def record_rejections(self, distribution: str, numeric: str, count: int) -> None:
        if count:
            self.rejections.add(count, {"distribution": distribution, "numeric": numeric})
