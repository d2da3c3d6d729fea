import pytest

from app.agent.artifacts import SignalSet


@pytest.fixture
def make_signals():
    """Build a SignalSet with every flag off except the ones passed in."""

    def _make(**flags: bool) -> SignalSet:
        values = {name: False for name in SignalSet.model_fields}
        values.update(flags)
        return SignalSet(**values)

    return _make
