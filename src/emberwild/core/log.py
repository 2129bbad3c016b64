from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from .ids import EventTitle, ChoiceLabel


@dataclass
class AuditEntry:
    type: str
    minute: int
    event_title: Optional[EventTitle] = None
    choice_label: Optional[ChoiceLabel] = None
    reason: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)


class AuditLog:
    def __init__(self):
        self.entries: List[AuditEntry] = []

    def add_entry(
        self,
        type: str,
        minute: int,
        event_title: Optional[EventTitle] = None,
        choice_label: Optional[ChoiceLabel] = None,
        reason: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        entry = AuditEntry(
            type=type,
            minute=minute,
            event_title=event_title,
            choice_label=choice_label,
            reason=reason,
            details=details or {},
        )
        self.entries.append(entry)

    def of_type(self, type: str) -> List[AuditEntry]:
        return [entry for entry in self.entries if entry.type == type]

    def clear(self):
        self.entries.clear()
