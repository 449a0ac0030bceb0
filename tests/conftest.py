"""
Shared fixtures for the lecture simulator tests.
"""

import pytest

from lecture_sim.core import Nationality, Student


class ScriptedRandom:
    """Random stand-in that replays scripted coin flips and choice indexes."""

    def __init__(self, flips=None, choices=None):
        self._flips = list(flips or [])
        self._choices = list(choices or [])

    def random(self):
        return self._flips.pop(0) if self._flips else 0.99

    def choice(self, seq):
        index = self._choices.pop(0) if self._choices else 0
        return seq[index]


@pytest.fixture
def make_student():
    def _make(name="Test", missed=0, respects=True, nationality=Nationality.LOCAL, immune=False):
        return Student(name, missed, respects, nationality, immune=immune)
    return _make


@pytest.fixture
def scripted_random():
    return ScriptedRandom
