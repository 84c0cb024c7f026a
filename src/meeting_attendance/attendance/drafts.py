from __future__ import annotations

from typing import Optional


class JustificationDrafts:
    """Unsaved justification text for the currently selected event.

    Drafts are keyed by member id and only make sense while the member is
    absent, so switching events drops them all.
    """

    def __init__(self, event_id: Optional[str] = None, texts: Optional[dict[str, str]] = None):
        self.event_id = event_id
        self._texts: dict[str, str] = dict(texts or {})

    def select_event(self, event_id: Optional[str]) -> None:
        if event_id != self.event_id:
            self._texts.clear()
        self.event_id = event_id

    def set(self, member_id: str, text: Optional[str]) -> None:
        if text is None or not text.strip():
            self._texts.pop(member_id, None)
            return
        self._texts[member_id] = text

    def get(self, member_id: str) -> str:
        return self._texts.get(member_id, "")

    def clear(self, member_id: str) -> None:
        self._texts.pop(member_id, None)

    def has(self, member_id: str) -> bool:
        return member_id in self._texts

    def texts(self) -> dict[str, str]:
        return dict(self._texts)

    def to_dict(self) -> dict:
        return {"event_id": self.event_id, "texts": dict(self._texts)}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "JustificationDrafts":
        data = data or {}
        return cls(event_id=data.get("event_id"), texts=data.get("texts") or {})
