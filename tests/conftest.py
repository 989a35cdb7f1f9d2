import pytest

from src.rating.engine import RatingEngine
from src.rating.knowledge_base import KnowledgeBase
from src.rating.profile import DriverProfile


@pytest.fixture
def kb():
    return KnowledgeBase()


@pytest.fixture
def engine(kb):
    return RatingEngine(knowledge_base=kb)


@pytest.fixture
def make_profile():
    def _make(age=30, make="Toyota", model="Camry", accidents=0):
        return DriverProfile(
            age=age,
            vehicle_make=make,
            vehicle_model=model,
            accidents_in_last_five_years=accidents,
        )

    return _make
