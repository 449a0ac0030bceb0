"""
API module exposing the simulator over REST.
"""

from .rest_api import LectureSimRestAPI

__all__ = [
    "LectureSimRestAPI",
]
