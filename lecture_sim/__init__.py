"""
Lecture Sim: a classroom attendance and evaluation simulator

Simulates a roster of students attending (or skipping) a short lecture
series, then judges each student with one of several pass/fail policies.
Students matching the risk rule are flagged and removed before judgement.
"""

__version__ = "1.0.0"
__author__ = "Lecture Sim Development Team"
__description__ = "Classroom attendance and evaluation simulator"
