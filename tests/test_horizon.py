import pytest

from fund_selector.horizon import classify_horizon
from fund_selector.model_interface.types import HorizonBucket


@pytest.mark.parametrize("age", [20, 30, 45])
def test_long_band(age):
    assert classify_horizon(age) is HorizonBucket.LONG

@pytest.mark.parametrize("age", [46, 50, 55])
def test_medium_band(age):
    assert classify_horizon(age) is HorizonBucket.MEDIUM

@pytest.mark.parametrize("age", [56, 70, 100, 150])
def test_short_band(age):
    assert classify_horizon(age) is HorizonBucket.SHORT

@pytest.mark.parametrize("age", [19, 16, 0, -5])
def test_young_or_nonsense_ages_default_to_long(age):
    assert classify_horizon(age) is HorizonBucket.LONG

def test_every_age_gets_a_bucket():
    for age in range(-10, 130):
        assert isinstance(classify_horizon(age), HorizonBucket)

def test_bucket_labels():
    assert HorizonBucket.SHORT.label == "Short-Term (1-5 years)"
