#!/usr/bin/env python3
"""
Action executor

Applies actions strictly in order. Every document action re-reads its file,
mutates the parsed tree and rewrites the whole file, so later actions see the
effects of earlier ones. A failing action becomes an error result and never
stops the batch.
"""

import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Tuple, Type, Union

from bs4 import BeautifulSoup, Doctype

from .actions import (
    ACTION_TYPES,
    WILDCARD,
    Action,
    ActionError,
    AddAnimation,
    AddAttribute,
    AddBlock,
    ApplyTemplate,
    Backup,
    ChangeFontSize,
    ChangeLanguage,
    ChangeStyle,
    ChangeText,
    ChangeTheme,
    ExportSettings,
    ImportSettings,
    ModifyAttribute,
    ModifyStyle,
    RemoveAttribute,
    ResetSettings,
    SelectorNotFoundError,
    SetAutoSave,
    SetFullscreen,
    SetNotifications,
    ShowAbout,
    ShowFileHistory,
    ShowHelp,
    ShowShortcuts,
    UpdateImage,
    action_from_dict,
    file_of,
    kind_of,
    selector_of,
)
from .models import STATUS_ERROR, STATUS_MODIFIED, ActionResult
from .presets import (
    ABOUT_INFO,
    ANIMATIONS,
    DEFAULT_SETTINGS,
    HELP_CONTENT,
    KEYBOARD_SHORTCUTS,
    RECENT_FILES,
    template_css,
)
from .styles import merge_style, set_property

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Successfully applied changes"
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"
PARSER = "html.parser"

# (status, message, details)
Outcome = Tuple[str, str, Dict[str, Any]]


def load_document(file: str) -> BeautifulSoup:
    return ensure_skeleton(BeautifulSoup(Path(file).read_text(encoding="utf-8"), PARSER))


def ensure_skeleton(soup: BeautifulSoup) -> BeautifulSoup:
    """
    Give a parsed document an <html><head>...</head><body>...</body></html> frame.

    html.parser keeps fragments as they are, so a file holding only
    "<h1>Title</h1>" has no <body> for page-level actions to target. Existing
    content is moved into a new <body>; a doctype stays in front.
    """
    if soup.body is not None:
        return soup
    html = soup.find("html")
    if html is None:
        html = soup.new_tag("html")
        for node in [n for n in soup.contents if not isinstance(n, Doctype)]:
            html.append(node.extract())
        soup.append(html)
    head = html.find("head", recursive=False)
    body = soup.new_tag("body")
    for node in [n for n in html.contents if n is not head]:
        body.append(node.extract())
    if head is None:
        html.append(soup.new_tag("head"))
    html.append(body)
    return soup


def save_document(file: str, soup: BeautifulSoup) -> None:
    Path(file).write_text(str(soup), encoding="utf-8")


def select_all(soup: BeautifulSoup, selector: str, message: str = "No elements found with selector") -> list:
    matches = soup.select(selector)
    if not matches:
        raise SelectorNotFoundError(f"{message}: {selector}")
    return matches


def ensure_style_block(soup: BeautifulSoup):
    """First <style> in the document, created inside <head> when absent"""
    style = soup.find("style")
    if style is not None:
        return style
    head = soup.find("head")
    if head is None:
        head = soup.new_tag("head")
        soup.html.insert(0, head)
    style = soup.new_tag("style")
    head.append(style)
    return style


class ActionExecutor:
    """Dispatches each action to its handler by action class"""

    def __init__(self):
        self.handlers: Dict[Type[Action], Callable[[Any], Outcome]] = {
            ChangeText: self._change_text,
            AddBlock: self._add_block,
            UpdateImage: self._update_image,
            ChangeStyle: self._change_style,
            ModifyStyle: self._modify_style,
            ModifyAttribute: self._set_attribute,
            AddAttribute: self._set_attribute,
            RemoveAttribute: self._remove_attribute,
            Backup: self._backup,
            ApplyTemplate: self._apply_template,
            AddAnimation: self._add_animation,
            ChangeTheme: lambda a: _echo(f"Theme changed to {a.theme}", theme=a.theme),
            ChangeFontSize: lambda a: _echo(f"Font size changed to {a.size}", size=a.size),
            ChangeLanguage: lambda a: _echo(f"Language changed to {a.language}", language=a.language),
            SetAutoSave: lambda a: _echo(f"Auto-save {_onoff(a.enabled)}", autoSave=a.enabled),
            ShowShortcuts: lambda a: _echo("Keyboard shortcuts displayed", shortcuts=dict(KEYBOARD_SHORTCUTS)),
            ShowFileHistory: lambda a: _echo("File history displayed", recentFiles=list(RECENT_FILES)),
            ExportSettings: lambda a: _echo("Settings exported successfully", settings=dict(DEFAULT_SETTINGS)),
            ImportSettings: lambda a: _echo("Settings imported successfully"),
            SetNotifications: lambda a: _echo(f"Notifications {_onoff(a.enabled)}", notifications=a.enabled),
            SetFullscreen: lambda a: _echo(f"Fullscreen mode {_onoff(a.enabled)}", fullscreen=a.enabled),
            ShowHelp: lambda a: _echo("Help displayed", help=HELP_CONTENT),
            ShowAbout: lambda a: _echo("About information displayed", about=ABOUT_INFO),
            ResetSettings: lambda a: _echo("Settings reset to default values"),
        }
        missing = set(ACTION_TYPES.values()) - set(self.handlers)
        if missing:
            raise RuntimeError(f"No handler for: {sorted(c.kind for c in missing)}")

    def apply(self, actions: List[Union[Action, Mapping[str, Any]]]) -> List[ActionResult]:
        return [self.apply_one(item) for item in actions]

    def apply_one(self, item: Union[Action, Mapping[str, Any]]) -> ActionResult:
        if isinstance(item, Action):
            action = item
        else:
            try:
                action = action_from_dict(item)
            except ActionError as e:
                logger.warning(f"Rejected action {item!r}: {e}")
                data = item if isinstance(item, Mapping) else {}
                kind = kind_of(data) if data else None
                return ActionResult(
                    action=str(kind) if kind else "unknown",
                    status=STATUS_ERROR,
                    message=str(e),
                    file=data.get("file"),
                    selector=data.get("selector") or data.get("parentSelector"),
                    error=str(e),
                )

        file, selector = file_of(action), selector_of(action)
        try:
            status, message, details = self.handlers[type(action)](action)
        except ActionError as e:
            logger.warning(f"{action.kind} failed: {e}")
            return ActionResult(action.kind, STATUS_ERROR, str(e), file, selector, error=str(e))
        except Exception as e:
            logger.error(f"{action.kind} failed: {e}")
            return ActionResult(
                action.kind, STATUS_ERROR, f"Failed to apply action: {e}", file, selector, error=str(e)
            )
        logger.info(f"{action.kind} {file or ''} {selector or ''}: {status}")
        return ActionResult(action.kind, status, message, file, selector, details=details)

    # --- document handlers ---

    def _change_text(self, action: ChangeText) -> Outcome:
        soup = load_document(action.file)
        wildcard = action.old_text in (WILDCARD, "")
        for el in select_all(soup, action.selector):
            if wildcard:
                el.string = action.new_text
                continue
            text = el.get_text()
            if action.old_text in text:
                el.string = text.replace(action.old_text, action.new_text, 1)
        save_document(action.file, soup)
        return _modified()

    def _add_block(self, action: AddBlock) -> Outcome:
        soup = load_document(action.file)
        for parent in select_all(soup, action.parent_selector, "Parent element not found"):
            fragment = BeautifulSoup(action.html_block, PARSER)
            for node in list(fragment.contents):
                parent.append(node.extract())
        save_document(action.file, soup)
        return _modified()

    def _update_image(self, action: UpdateImage) -> Outcome:
        soup = load_document(action.file)
        for el in select_all(soup, action.selector):
            el["src"] = action.new_src
        save_document(action.file, soup)
        return _modified()

    def _change_style(self, action: ChangeStyle) -> Outcome:
        soup = load_document(action.file)
        for el in select_all(soup, action.selector):
            el["style"] = set_property(el.get("style", ""), action.property, action.value)
        save_document(action.file, soup)
        return _modified()

    def _modify_style(self, action: ModifyStyle) -> Outcome:
        soup = load_document(action.file)
        for el in select_all(soup, action.selector):
            el["style"] = merge_style(el.get("style", ""), action.style)
        save_document(action.file, soup)
        return _modified()

    def _set_attribute(self, action: Union[ModifyAttribute, AddAttribute]) -> Outcome:
        soup = load_document(action.file)
        for el in select_all(soup, action.selector):
            el[action.attribute] = action.value
        save_document(action.file, soup)
        return _modified()

    def _remove_attribute(self, action: RemoveAttribute) -> Outcome:
        soup = load_document(action.file)
        for el in select_all(soup, action.selector):
            if action.attribute in el.attrs:
                del el[action.attribute]
        save_document(action.file, soup)
        return _modified()

    def _backup(self, action: Backup) -> Outcome:
        timestamp = action.timestamp or datetime.now().strftime(BACKUP_TIMESTAMP_FORMAT)
        backup_path = f"{action.file}.backup.{timestamp}"
        shutil.copyfile(action.file, backup_path)
        return STATUS_MODIFIED, SUCCESS_MESSAGE, {"backupPath": backup_path}

    def _apply_template(self, action: ApplyTemplate) -> Outcome:
        soup = load_document(action.file)
        ensure_style_block(soup).string = template_css(action.template_type)
        save_document(action.file, soup)
        return _modified()

    def _add_animation(self, action: AddAnimation) -> Outcome:
        preset = ANIMATIONS.get((action.animation_type or "").lower())
        if preset is None:
            raise ValueError(f"Unknown animation type: {action.animation_type}")
        class_name, css = preset
        soup = load_document(action.file)
        matches = select_all(soup, action.selector)
        style = ensure_style_block(soup)
        style.string = style.get_text() + css
        for el in matches:
            classes = list(el.get("class") or [])
            if class_name not in classes:
                classes.append(class_name)
            el["class"] = classes
        save_document(action.file, soup)
        return _modified()


def _modified() -> Outcome:
    return STATUS_MODIFIED, SUCCESS_MESSAGE, {}


def _echo(message: str, **details: Any) -> Outcome:
    return STATUS_MODIFIED, message, details


def _onoff(enabled: bool) -> str:
    return "enabled" if enabled else "disabled"


def apply_actions(actions: List[Union[Action, Mapping[str, Any]]]) -> List[ActionResult]:
    return ActionExecutor().apply(actions)
