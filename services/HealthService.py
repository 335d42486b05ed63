# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-08
# Description: HealthService.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass

from api.schemas.health import DeepHealthResponse, SmokeTestSummary
from health.SmokeTestRunner import SmokeTestRunner


@dataclass
class HealthService:
    """
    Wraps SmokeTestRunner and returns DeepHealthResponse for the API layer.
    """

    test_runner: SmokeTestRunner

    async def deep_health(self) -> DeepHealthResponse:
        results = await self.test_runner.run_all()

        total = len(results)
        passed = sum(1 for ok in results.values() if ok)
        failed = total - passed

        return DeepHealthResponse(
            status="ok" if failed == 0 else "error",
            results=results,
            summary=SmokeTestSummary(total=total, passed=passed, failed=failed),
            total_verses=len(self.test_runner.index),
            embed_model=self.test_runner.embedder.model,
            embed_endpoint=self.test_runner.embedder.endpoint,
        )
