import pytest
from agents import set_tracing_disabled


@pytest.fixture(autouse=True)
def no_trace_export():
    set_tracing_disabled(True)
    yield
