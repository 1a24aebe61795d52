"""
Data model for the edit pipeline: site index records and action results.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


STATUS_MODIFIED = "modified"
STATUS_NO_CHANGE = "no_change"
STATUS_ERROR = "error"

MESSAGE_SUCCESS = "Success"
MESSAGE_NO_ACTIONS = "No actions generated"
MESSAGE_ERROR = "Error processing command"


@dataclass(frozen=True)
class ElementDescriptor:
    """One element of interest found in a markup document"""
    tag: str
    text: str
    selector: str
    file: str
    id: Optional[str] = None
    class_name: Optional[str] = None
    src: Optional[str] = None
    href: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.tag,
            "text": self.text,
            "id": self.id,
            "className": self.class_name,
            "src": self.src,
            "href": self.href,
            "selector": self.selector,
            "file": self.file,
        }


@dataclass
class HtmlRecord:
    file: str
    items: List[ElementDescriptor] = field(default_factory=list)

    type = "html"

    def headings(self, limit: int = 3) -> List[str]:
        """Texts of the first h1/h2 elements"""
        return [i.text for i in self.items if i.tag in ("h1", "h2")][:limit]


@dataclass
class TextRecord:
    file: str
    lines: List[str] = field(default_factory=list)

    type = "text"

    @property
    def first_line(self) -> str:
        return self.lines[0] if self.lines else ""


KnowledgeRecord = Union[HtmlRecord, TextRecord]


@dataclass
class SiteIndex:
    """Structured summary of a file or folder, built fresh for every command"""
    root_dir: str
    files: List[str] = field(default_factory=list)
    records: List[KnowledgeRecord] = field(default_factory=list)

    @property
    def html_records(self) -> List[HtmlRecord]:
        return [r for r in self.records if isinstance(r, HtmlRecord)]

    def primary_document(self) -> Optional[str]:
        """First markup document; the default target for rule-based edits"""
        html = self.html_records
        return html[0].file if html else None


@dataclass
class ActionResult:
    """Outcome of executing one action"""
    action: str
    status: str
    message: str
    file: Optional[str] = None
    selector: Optional[str] = None
    error: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status != STATUS_ERROR

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "action": self.action,
            "file": self.file,
            "selector": self.selector,
            "status": self.status,
            "message": self.message,
        }
        if self.error is not None:
            out["error"] = self.error
        if self.details:
            out.update(self.details)
        return out
