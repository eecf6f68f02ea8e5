"""Request metrics middleware tests."""

import pytest
from httpx import AsyncClient
from prometheus_client import REGISTRY


def _sample(name: str, labels: dict[str, str]) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0


@pytest.mark.asyncio
async def test_requests_and_responses_are_counted(
    test_app_async_client: AsyncClient,
) -> None:
    request_labels = {"method": "GET", "path": "/api/v1/health"}
    response_labels = {"status_code": "200"}
    requests_before = _sample("app_http_requests_total", request_labels)
    responses_before = _sample("app_http_responses_total", response_labels)
    durations_before = _sample(
        "app_http_request_duration_seconds_count", request_labels
    )

    await test_app_async_client.get("/api/v1/health")

    assert _sample("app_http_requests_total", request_labels) == requests_before + 1
    assert _sample("app_http_responses_total", response_labels) >= responses_before + 1
    assert (
        _sample("app_http_request_duration_seconds_count", request_labels)
        == durations_before + 1
    )
