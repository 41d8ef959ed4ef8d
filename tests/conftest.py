import pytest

from .grids import RESTAURANT, RESTROOM_CORNER, UPPER_FLOOR


@pytest.fixture
def restaurant_rows():
    return list(RESTAURANT)


@pytest.fixture
def restroom_rows():
    return list(RESTROOM_CORNER)


@pytest.fixture
def upper_rows():
    return list(UPPER_FLOOR)
