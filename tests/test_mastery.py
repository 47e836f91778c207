"""
Tests for mastery transitions.
"""
import pytest

from vocabflow.scheduling import next_mastery_level
from vocabflow.schemas import MasteryLevel


@pytest.mark.parametrize("current, remembered, expected", [
    (MasteryLevel.NEW, True, MasteryLevel.LEARNING),
    (MasteryLevel.NEW, False, MasteryLevel.LEARNING),
    (MasteryLevel.LEARNING, True, MasteryLevel.MASTERED),
    (MasteryLevel.LEARNING, False, MasteryLevel.LEARNING),
    (MasteryLevel.MASTERED, True, MasteryLevel.MASTERED),
    (MasteryLevel.MASTERED, False, MasteryLevel.LEARNING),
])
def test_transition_table(current, remembered, expected):
    assert next_mastery_level(current, remembered) == expected


def test_accepts_plain_strings():
    assert next_mastery_level("Learning", True) == MasteryLevel.MASTERED


@pytest.mark.parametrize("remembered", [True, False])
def test_unknown_level_treated_as_new(remembered):
    assert next_mastery_level("Expert", remembered) == MasteryLevel.LEARNING


def test_new_never_jumps_to_mastered():
    assert next_mastery_level(MasteryLevel.NEW, True) != MasteryLevel.MASTERED
