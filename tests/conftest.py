import pytest

from mdedit.runtime import telemetry


@pytest.fixture(autouse=True, scope="session")
def quiet_telemetry() -> None:
    telemetry.configure(preset="quiet")
