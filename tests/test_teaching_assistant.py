# tests/test_teaching_assistant.py

import pytest

from models.values import Email, Phone, TeachingAssistantName


def test_same_name_is_same_identity(sample_teaching_assistant):
    twin = sample_teaching_assistant.replace(
        phone=Phone("80001111"), email=Email("other@example.com")
    )

    assert sample_teaching_assistant.is_same_identity(twin)
    assert sample_teaching_assistant != twin


def test_renamed_is_different_identity(sample_teaching_assistant):
    renamed = sample_teaching_assistant.replace(
        name=TeachingAssistantName("David Li")
    )

    assert not sample_teaching_assistant.is_same_identity(renamed)


def test_teaching_assistant_to_str(sample_teaching_assistant):
    assert str(sample_teaching_assistant) == (
        "Charlotte Oliveiro; Module: CS2103T; Phone: 93210283; "
        "Email: charlotte@example.com; Telegram: @charlotte_o; Tags: [headTA]"
    )


def test_tags_must_be_tag_values(sample_teaching_assistant):
    with pytest.raises(TypeError, match="Tag"):
        sample_teaching_assistant.replace(tags=["headTA"])
