# models/types.py

"""
Holds TypeVar definition for simplifying type checks.
"""

from typing import TypeVar

from .student import Student
from .teaching_assistant import TeachingAssistant
from .tutorial import Tutorial

RecordType = TypeVar("RecordType", Student, TeachingAssistant, Tutorial)
