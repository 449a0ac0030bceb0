"""
Tests for the pass/fail judges.
"""

import random

import pytest

from lecture_sim.core import policies
from lecture_sim.core import (
    JUDGES, JudgeKind, choose_judge, get_judge,
    lenient_judge, strict_judge, weighted_score, weighted_score_judge,
)


class TestStrictAndLenient:
    """Strict and lenient are not nested; check both on the same students."""

    def test_missed_three_without_basics(self, make_student):
        student = make_student(missed=3, respects=False)
        assert strict_judge(student) is False
        assert lenient_judge(student) is True

    def test_missed_zero_without_basics(self, make_student):
        student = make_student(missed=0, respects=False)
        assert strict_judge(student) is False
        assert lenient_judge(student) is True

    def test_strict_pass(self, make_student):
        assert strict_judge(make_student(missed=2, respects=True))
        assert not strict_judge(make_student(missed=3, respects=True))

    def test_lenient_bounds(self, make_student):
        assert lenient_judge(make_student(missed=6, respects=False))
        assert not lenient_judge(make_student(missed=7, respects=False))
        assert lenient_judge(make_student(missed=20, respects=True))


class TestWeightedScore:

    def test_missed_five_without_basics_fails(self, make_student):
        student = make_student(missed=5, respects=False)
        assert weighted_score(student) == pytest.approx(6.0)
        assert weighted_score_judge(student) is False

    def test_missed_five_with_basics_passes(self, make_student):
        student = make_student(missed=5, respects=True)
        assert weighted_score(student) == pytest.approx(2.0)
        assert weighted_score_judge(student) is True

    def test_score_equal_to_limit_fails(self, make_student, monkeypatch):
        monkeypatch.setattr(policies, "WEIGHTED_PASS_LIMIT", 6.0)
        student = make_student(missed=5, respects=False)
        assert weighted_score(student) == 6.0
        assert weighted_score_judge(student) is False

    def test_high_missed_fails_even_with_basics(self, make_student):
        student = make_student(missed=9, respects=True)
        assert weighted_score(student) == pytest.approx(5.2)
        assert weighted_score_judge(student) is False

    def test_just_below_limit_passes(self, make_student):
        student = make_student(missed=3, respects=False)
        assert weighted_score(student) == pytest.approx(4.4)
        assert weighted_score_judge(student) is True


class TestJudgeRegistry:

    def test_every_kind_registered(self):
        assert set(JUDGES) == set(JudgeKind)
        assert get_judge(JudgeKind.STRICT) is strict_judge
        assert get_judge(JudgeKind.LENIENT) is lenient_judge
        assert get_judge(JudgeKind.WEIGHTED_SCORE) is weighted_score_judge

    def test_choose_judge_covers_all_kinds(self):
        rng = random.Random(7)
        drawn = {choose_judge(rng) for _ in range(200)}
        assert drawn == set(JudgeKind)

    def test_choose_judge_uses_rng_choice(self, scripted_random):
        rng = scripted_random(choices=[2, 0])
        assert choose_judge(rng) is JudgeKind.WEIGHTED_SCORE
        assert choose_judge(rng) is JudgeKind.STRICT
