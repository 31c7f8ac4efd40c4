"""Conversation log and role normalization tests."""

from maestro.models.chat import ChatMessage, FileReference
from maestro.services.conversation import ConversationLog, normalize_role


def test_assistant_maps_to_model():
    assert normalize_role("assistant") == "model"


def test_everything_else_maps_to_user():
    for role in ["user", "system", "model", "Assistant", "", None, "tool"]:
        assert normalize_role(role) == "user"


def test_model_role_is_not_special_cased():
    for role in ["assistant", "user", "system", "model"]:
        once = normalize_role(role)
        assert normalize_role(once) == "user"
        assert once in ("user", "model")


def test_log_preserves_insertion_order():
    log = ConversationLog()
    log.append_text("user", "first")
    log.append_file(FileReference(uri="files/1", mime_type="audio/wav"))
    log.append_text("model", "second")

    turns = log.turns
    assert [t.role for t in turns] == ["user", "user", "model"]
    assert turns[0].content == "first"
    assert turns[1].is_file
    assert turns[1].content.uri == "files/1"
    assert turns[2].content == "second"


def test_extend_messages_normalizes_roles():
    log = ConversationLog()
    added = log.extend_messages([
        ChatMessage(role="system", message="You help travelers."),
        ChatMessage(role="user", message="Weather in New York?"),
        ChatMessage(role="assistant", message="Sunny, 75F."),
    ])

    assert added == 3
    assert [t.role for t in log] == ["user", "user", "model"]
    assert log.turns[2].content == "Sunny, 75F."


def test_to_contents_renders_text_and_file_parts():
    log = ConversationLog()
    log.append_file(FileReference(uri="files/1", mime_type="image/png"))
    log.append_text("user", "What is this?")

    contents = log.to_contents()
    assert len(contents) == 2
    assert contents[0].role == "user"
    assert contents[0].parts[0].file_data.file_uri == "files/1"
    assert contents[0].parts[0].file_data.mime_type == "image/png"
    assert contents[0].parts[0].text is None
    assert contents[1].parts[0].text == "What is this?"


def test_turns_snapshot_is_detached():
    log = ConversationLog()
    log.append_text("user", "hi")
    snapshot = log.turns
    log.append_text("user", "again")
    assert len(snapshot) == 1
    assert len(log) == 2
