"""Latest-wins scheduling of re-analysis while inputs are still changing.

Each submission waits for a quiescence delay before analyzing; a newer
submission cancels the pending one, whose caller then receives ``None``.
"""

import asyncio
import logging
from collections.abc import Callable

from config import settings
from models.schemas.analysis_report import AnalysisReport
from services.cv_analyzer import generate_analysis_report

logger = logging.getLogger(__name__)


class LatestWinsAnalyzer:
    def __init__(
        self,
        delay: float | None = None,
        analyze: Callable[[str, str], AnalysisReport] = generate_analysis_report,
    ) -> None:
        self.delay = settings.reanalysis_delay_ms / 1000 if delay is None else delay
        self._analyze = analyze
        self._pending: asyncio.Task | None = None
        self.latest: AnalysisReport | None = None

    @property
    def is_pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def cancel(self) -> None:
        """Drop the pending submission, if any."""
        if self.is_pending:
            self._pending.cancel()
        self._pending = None

    async def _run(self, cv_text: str, job_description: str) -> AnalysisReport:
        await asyncio.sleep(self.delay)
        return self._analyze(cv_text, job_description)

    async def submit(self, cv_text: str | None, job_description: str | None) -> AnalysisReport | None:
        """Analyze after the delay unless superseded.

        Returns ``None`` when superseded or when either text is empty.
        """
        self.cancel()
        if not cv_text or not job_description:
            self.latest = None
            return None

        task = asyncio.create_task(self._run(cv_text, job_description))
        self._pending = task
        try:
            report = await task
        except asyncio.CancelledError:
            # cancel() detaches the task first; anything else is our own cancellation
            if self._pending is task:
                self._pending = None
                raise
            logger.debug("Superseded analysis discarded")
            return None

        if self._pending is task:
            self._pending = None

        self.latest = report
        return report
