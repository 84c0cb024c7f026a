from meeting_attendance.attendance.drafts import JustificationDrafts


def test_switching_event_drops_drafts():
    drafts = JustificationDrafts("e1")
    drafts.set("m1", "médico")

    drafts.select_event("e1")
    assert drafts.get("m1") == "médico"

    drafts.select_event("e2")
    assert drafts.get("m1") == ""
    assert drafts.event_id == "e2"


def test_blank_draft_is_removed():
    drafts = JustificationDrafts("e1")
    drafts.set("m1", "texto")
    drafts.set("m1", "  ")

    assert not drafts.has("m1")


def test_session_round_trip():
    drafts = JustificationDrafts("e1")
    drafts.set("m1", "texto")

    restored = JustificationDrafts.from_dict(drafts.to_dict())

    assert restored.event_id == "e1"
    assert restored.get("m1") == "texto"
    assert JustificationDrafts.from_dict(None).event_id is None


def test_texts_is_a_copy():
    drafts = JustificationDrafts("e1")
    drafts.set("m1", "texto")

    texts = drafts.texts()
    texts["m2"] = "outro"

    assert drafts.texts() == {"m1": "texto"}
