"""Progress notifications emitted while the pipeline runs."""

import logging

logger = logging.getLogger(__name__)


class ProgressSink:
    """Receives one notification per file and per processing stage."""

    def notify(self, stage: str, identifier: str) -> None:
        """Report that ``stage`` started on ``identifier``."""
        logger.info("%s %s", stage, identifier)


def safe_notify(sink: ProgressSink | None, stage: str, identifier: str) -> None:
    """Call the sink, never letting its failure leak into the pipeline."""
    if sink is None:
        return
    try:
        sink.notify(stage, identifier)
    except Exception:  # noqa: BLE001
        logger.debug("Progress sink failed on %s %s", stage, identifier, exc_info=True)
