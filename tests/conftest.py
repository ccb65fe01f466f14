import pytest

from compareoffers.domain.models import Offer, Step


@pytest.fixture
def two_step_offer():
    # 1500__7-5000_8
    return Offer(advance=1500, escalator=(Step(rate=7, copies=5000), Step(rate=8, copies=0)))


@pytest.fixture
def three_step_offer():
    # 2500__8-5000_9-10000_10
    return Offer(
        advance=2500,
        escalator=(
            Step(rate=8, copies=5000),
            Step(rate=9, copies=5000),
            Step(rate=10, copies=0),
        ),
    )


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from compareoffers.main import app

    return TestClient(app)
