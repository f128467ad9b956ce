# tests/conftest.py

import pytest

from models.roster import Roster
from models.student import Student
from models.teaching_assistant import TeachingAssistant
from models.tutorial import Tutorial
from models.values import (
    Attendance,
    Email,
    Grade,
    Name,
    Participation,
    Phone,
    StudentId,
    Tag,
    TeachingAssistantName,
    Telegram,
    TutorialDay,
    TutorialModule,
    TutorialName,
    TutorialTimeslot,
    TutorialVenue,
)


@pytest.fixture
def sample_student():
    return Student(
        name=Name("Alex Yeoh"),
        id=StudentId("A1234567B"),
        phone=Phone("87438807"),
        email=Email("alexyeoh@example.com"),
        telegram=Telegram("@alexyeoh"),
        tutorial_module=TutorialModule("CS2103T"),
        tutorial_name=TutorialName("T23"),
        attendance=Attendance("3"),
        participation=Participation("120"),
        grade=Grade("B+"),
        tags={Tag("friends"), Tag("quiet")},
    )


@pytest.fixture
def other_student():
    return Student.create(
        name=Name("Bernice Yu"),
        id=StudentId("A7654321C"),
        phone=Phone("99272758"),
        email=Email("berniceyu@example.com"),
        telegram=Telegram("bernice_yu"),
        tutorial_module=TutorialModule("CS2103T"),
        tutorial_name=TutorialName("T24"),
    )


@pytest.fixture
def sample_tutorial():
    return Tutorial(
        name=TutorialName("T23"),
        module=TutorialModule("CS2103T"),
        venue=TutorialVenue("COM1-0208"),
        timeslot=TutorialTimeslot("10:00-11:00"),
        day=TutorialDay("Monday"),
    )


@pytest.fixture
def other_tutorial():
    return Tutorial(
        name=TutorialName("T24"),
        module=TutorialModule("CS2103T"),
        venue=TutorialVenue("COM1-0209"),
        timeslot=TutorialTimeslot("12:00-13:00"),
        day=TutorialDay("Tuesday"),
    )


@pytest.fixture
def sample_teaching_assistant():
    return TeachingAssistant(
        name=TeachingAssistantName("Charlotte Oliveiro"),
        module=TutorialModule("CS2103T"),
        phone=Phone("93210283"),
        email=Email("charlotte@example.com"),
        telegram=Telegram("charlotte_o"),
        tags={Tag("headTA")},
    )


@pytest.fixture
def sample_roster(sample_student, sample_tutorial):
    roster = Roster()
    roster.add_student(sample_student)
    roster.add_tutorial(sample_tutorial)
    return roster


@pytest.fixture
def roster_file(tmp_path):
    return str(tmp_path / "roster.json")
