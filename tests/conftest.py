from types import SimpleNamespace

import pytest

ENVIRONMENT = {
    "AZURE_TENANT_ID": "tenant",
    "AZURE_CLIENT_ID": "client",
    "AZURE_CLIENT_SECRET": "secret",
    "AZURE_SUBSCRIPTION_ID": "subscription",
}

RESOURCE_ID = "/subscriptions/subscription/resourceGroups/rg/providers/Microsoft.Web/sites/app"


class RecordingOperations:
    """Stands in for an SDK operation group; every list() call is recorded."""

    def __init__(self, records):
        self.records = records
        self.calls = []
        self.consumed = 0

    def list(self, resource_uri, **kwargs):
        self.calls.append((resource_uri, kwargs))
        return self._stream()

    def _stream(self):
        for record in self.records:
            self.consumed += 1
            yield record


def make_name(value):
    return SimpleNamespace(value=value, localized_value=f"{value} (localized)")


def make_definition(i):
    return SimpleNamespace(
        id=f"def-{i}",
        name=make_name(f"Metric{i}"),
        resource_id=RESOURCE_ID,
        unit="Percent",
        primary_aggregation_type="Average",
        metric_availabilities=["PT1M"],
    )


def make_metric(i):
    return SimpleNamespace(
        id=f"metric-{i}",
        name=make_name(f"Metric{i}"),
        type="Microsoft.Insights/metrics",
        unit="Percent",
        data=[i],
    )


@pytest.fixture
def fake_client():
    return SimpleNamespace(
        metric_definitions=RecordingOperations([make_definition(i) for i in range(8)]),
        metrics=RecordingOperations([make_metric(i) for i in range(8)]),
    )


@pytest.fixture
def azure_env(monkeypatch):
    for name, value in ENVIRONMENT.items():
        monkeypatch.setenv(name, value)
    return ENVIRONMENT


@pytest.fixture
def resource_id():
    return RESOURCE_ID
