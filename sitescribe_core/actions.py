"""
Actions - the closed set of edit and app-setting operations

Every action kind is a frozen dataclass registered in ACTION_TYPES. The wire
form (planner output, JSON results) is a dict with an "action" discriminator
and camelCase fields:

    {"action": "changeText", "file": "index.html", "selector": "h1",
     "oldText": "*", "newText": "Welcome"}

Adding a kind means adding a dataclass here and a handler in the executor.
"""

from dataclasses import dataclass, fields, MISSING
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type

# Matches any current text in changeText
WILDCARD = "*"


class ActionError(Exception):
    """Base class for per-action failures"""


class UnknownActionError(ActionError):
    def __init__(self, kind: Any):
        self.kind = kind
        super().__init__(f"Unknown action: {kind}")


class ActionValidationError(ActionError):
    pass


class SelectorNotFoundError(ActionError):
    pass


@dataclass(frozen=True)
class Action:
    kind: ClassVar[str] = ""

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"action": self.kind}
        for f in fields(self):
            out[camel(f.name)] = getattr(self, f.name)
        return out


@dataclass(frozen=True)
class DocumentAction(Action):
    """An action that reads and rewrites one document"""
    file: str


@dataclass(frozen=True)
class SettingAction(Action):
    """An application-setting echo; no document is touched"""


# --- Document actions ---

@dataclass(frozen=True)
class ChangeText(DocumentAction):
    kind: ClassVar[str] = "changeText"
    selector: str
    new_text: str
    old_text: str = WILDCARD


@dataclass(frozen=True)
class AddBlock(DocumentAction):
    kind: ClassVar[str] = "addBlock"
    parent_selector: str
    html_block: str


@dataclass(frozen=True)
class UpdateImage(DocumentAction):
    kind: ClassVar[str] = "updateImage"
    selector: str
    new_src: str


@dataclass(frozen=True)
class ChangeStyle(DocumentAction):
    kind: ClassVar[str] = "changeStyle"
    selector: str
    property: str
    value: str


@dataclass(frozen=True)
class ModifyStyle(DocumentAction):
    kind: ClassVar[str] = "modifyStyle"
    selector: str
    style: str


@dataclass(frozen=True)
class ModifyAttribute(DocumentAction):
    kind: ClassVar[str] = "modifyAttribute"
    selector: str
    attribute: str
    value: str


@dataclass(frozen=True)
class AddAttribute(DocumentAction):
    kind: ClassVar[str] = "addAttribute"
    selector: str
    attribute: str
    value: str = ""


@dataclass(frozen=True)
class RemoveAttribute(DocumentAction):
    kind: ClassVar[str] = "removeAttribute"
    selector: str
    attribute: str


@dataclass(frozen=True)
class Backup(DocumentAction):
    kind: ClassVar[str] = "backup"
    timestamp: Optional[str] = None


@dataclass(frozen=True)
class ApplyTemplate(DocumentAction):
    kind: ClassVar[str] = "applyTemplate"
    template_type: str


@dataclass(frozen=True)
class AddAnimation(DocumentAction):
    kind: ClassVar[str] = "addAnimation"
    selector: str
    animation_type: str


# --- App-setting actions ---

@dataclass(frozen=True)
class ChangeTheme(SettingAction):
    kind: ClassVar[str] = "changeTheme"
    theme: str


@dataclass(frozen=True)
class ChangeFontSize(SettingAction):
    kind: ClassVar[str] = "changeFontSize"
    size: str


@dataclass(frozen=True)
class ChangeLanguage(SettingAction):
    kind: ClassVar[str] = "changeLanguage"
    language: str


@dataclass(frozen=True)
class SetAutoSave(SettingAction):
    kind: ClassVar[str] = "setAutoSave"
    enabled: bool


@dataclass(frozen=True)
class ShowShortcuts(SettingAction):
    kind: ClassVar[str] = "showShortcuts"


@dataclass(frozen=True)
class ShowFileHistory(SettingAction):
    kind: ClassVar[str] = "showFileHistory"


@dataclass(frozen=True)
class ExportSettings(SettingAction):
    kind: ClassVar[str] = "exportSettings"


@dataclass(frozen=True)
class ImportSettings(SettingAction):
    kind: ClassVar[str] = "importSettings"


@dataclass(frozen=True)
class SetNotifications(SettingAction):
    kind: ClassVar[str] = "setNotifications"
    enabled: bool


@dataclass(frozen=True)
class SetFullscreen(SettingAction):
    kind: ClassVar[str] = "setFullscreen"
    enabled: bool


@dataclass(frozen=True)
class ShowHelp(SettingAction):
    kind: ClassVar[str] = "showHelp"


@dataclass(frozen=True)
class ShowAbout(SettingAction):
    kind: ClassVar[str] = "showAbout"


@dataclass(frozen=True)
class ResetSettings(SettingAction):
    kind: ClassVar[str] = "resetSettings"


ACTION_TYPES: Dict[str, Type[Action]] = {
    cls.kind: cls
    for cls in (
        ChangeText, AddBlock, UpdateImage, ChangeStyle, ModifyStyle,
        ModifyAttribute, AddAttribute, RemoveAttribute, Backup,
        ApplyTemplate, AddAnimation,
        ChangeTheme, ChangeFontSize, ChangeLanguage, SetAutoSave,
        ShowShortcuts, ShowFileHistory, ExportSettings, ImportSettings,
        SetNotifications, SetFullscreen, ShowHelp, ShowAbout, ResetSettings,
    )
}


def camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(p.capitalize() for p in rest)


def kind_of(data: Mapping[str, Any]) -> Any:
    return data.get("action") or data.get("kind")


def _coerce(kind: str, name: str, ftype: Any, value: Any) -> Any:
    if value is None:
        if ftype == Optional[str]:
            return None
        raise ActionValidationError(f"{kind}: field '{camel(name)}' must not be null")
    if ftype is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("true", "false", "on", "off"):
            return value.lower() in ("true", "on")
        raise ActionValidationError(f"{kind}: field '{camel(name)}' must be a boolean")
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ActionValidationError(f"{kind}: field '{camel(name)}' must be a string")
    return str(value)


def action_from_dict(data: Mapping[str, Any]) -> Action:
    """
    Decode one wire action.

    Raises:
        UnknownActionError: discriminator missing or not a known kind
        ActionValidationError: required field missing or of the wrong type
    """
    if not isinstance(data, Mapping):
        raise ActionValidationError(f"Action must be an object, got {type(data).__name__}")
    kind = kind_of(data)
    cls = ACTION_TYPES.get(kind) if isinstance(kind, str) else None
    if cls is None:
        raise UnknownActionError(kind)

    kwargs: Dict[str, Any] = {}
    for f in fields(cls):
        wire = camel(f.name)
        if wire in data:
            raw = data[wire]
        elif f.name in data:
            raw = data[f.name]
        elif f.default is not MISSING:
            continue
        else:
            raise ActionValidationError(f"{kind}: missing field '{wire}'")
        kwargs[f.name] = _coerce(kind, f.name, f.type, raw)
    return cls(**kwargs)


def actions_from_list(items: List[Mapping[str, Any]]) -> List[Action]:
    """Decode a whole plan; any invalid element invalidates the plan"""
    return [action_from_dict(item) for item in items]


def selector_of(action: Action) -> Optional[str]:
    return getattr(action, "selector", None) or getattr(action, "parent_selector", None)


def file_of(action: Action) -> Optional[str]:
    return getattr(action, "file", None)
