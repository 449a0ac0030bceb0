"""
Tests for the risk flag check.
"""

import pytest

from lecture_sim.core import Nationality, RiskCheckResult, check_risk_flag


class TestRiskFlag:

    def test_fatima_is_flagged(self, make_student):
        fatima = make_student(name="Fatima", missed=6, respects=False,
                              nationality=Nationality.NON_UNION_MEMBER)
        result = check_risk_flag(fatima)
        assert result.flagged
        assert "Fatima" in result.message

    def test_carlos_flagged_unless_immune(self, make_student):
        carlos = make_student(name="Carlos", missed=5, respects=False,
                              nationality=Nationality.NON_UNION_MEMBER)
        assert check_risk_flag(carlos).flagged
        assert not check_risk_flag(carlos.grant_immunity()).flagged

    @pytest.mark.parametrize("nationality", [Nationality.LOCAL, Nationality.UNION_MEMBER])
    def test_other_nationalities_never_flagged(self, make_student, nationality):
        student = make_student(missed=10, respects=False, nationality=nationality)
        assert student.is_at_risk()
        assert check_risk_flag(student) == RiskCheckResult.clear()

    @pytest.mark.parametrize("missed,respects", [(4, False), (10, True), (0, False)])
    def test_not_at_risk_never_flagged(self, make_student, missed, respects):
        student = make_student(missed=missed, respects=respects,
                               nationality=Nationality.NON_UNION_MEMBER)
        result = check_risk_flag(student)
        assert not result.flagged
        assert result.message is None
