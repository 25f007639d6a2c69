import pytest

from fakesmith.data import JOB
from fakesmith.job import job_descriptor, job_level, job_title
from fakesmith.randomness import seed


@pytest.fixture(autouse=True)
def _seeded():
    seed(11)


@pytest.mark.parametrize(
    "func, key",
    [(job_title, "title"), (job_descriptor, "descriptor"), (job_level, "level")],
)
def test_values_come_from_tables(func, key):
    for _ in range(50):
        assert func() in JOB[key]


def test_seed_repeats_values():
    seed(11)
    first = (job_title(), job_descriptor(), job_level())
    seed(11)
    assert (job_title(), job_descriptor(), job_level()) == first