"""
Document Indexer - turns a file or folder into a SiteIndex

Markup documents (.html/.htm) are parsed and scanned for headings, paragraphs,
images, links, spans and containers. Style (.css) and prose (.md) documents
are kept as a line preview. Everything else is ignored.
"""

import logging
import os
import re
from pathlib import Path
from typing import List, Optional, Union

from bs4 import BeautifulSoup

from .config import config
from .models import ElementDescriptor, HtmlRecord, KnowledgeRecord, SiteIndex, TextRecord
from .selector_builder import build_selector

logger = logging.getLogger(__name__)

SUPPORTED_FILE_RE = re.compile(r"\.(html?|css|md)$", re.IGNORECASE)
MARKUP_FILE_RE = re.compile(r"\.html?$", re.IGNORECASE)

INDEXED_ELEMENTS = "h1, h2, h3, p, img, a, span, div"


def is_supported(path: Union[str, Path]) -> bool:
    return bool(SUPPORTED_FILE_RE.search(str(path)))


def is_markup(path: Union[str, Path]) -> bool:
    return bool(MARKUP_FILE_RE.search(str(path)))


def read_document(path: Union[str, Path]) -> str:
    """Read a document as text; undecodable bytes are replaced, not fatal"""
    return Path(path).read_bytes().decode("utf-8", errors="replace")


def index_html(file: str, html: str) -> HtmlRecord:
    soup = BeautifulSoup(html, "html.parser")
    items: List[ElementDescriptor] = []
    for el in soup.select(INDEXED_ELEMENTS):
        classes = el.get("class") or []
        items.append(ElementDescriptor(
            tag=el.name,
            text=el.get_text().strip(),
            id=el.get("id") or None,
            class_name=" ".join(classes) or None,
            src=el.get("src") or None,
            href=el.get("href") or None,
            selector=build_selector(el),
            file=file,
        ))
    return HtmlRecord(file=file, items=items)


def index_text(file: str, content: str, max_lines: Optional[int] = None) -> TextRecord:
    limit = config.text_preview_lines if max_lines is None else max_lines
    lines = re.split(r"\r?\n", content)
    return TextRecord(file=file, lines=lines[:limit])


def discover_files(root: Path) -> List[str]:
    """Recursively list supported files under root, in sorted name order"""
    found: List[str] = []
    for entry in sorted(os.listdir(root)):
        full = root / entry
        if full.is_dir():
            found.extend(discover_files(full))
        elif is_supported(entry):
            found.append(str(full))
    return found


def index_site(path: Union[str, Path], max_lines: Optional[int] = None) -> SiteIndex:
    """
    Build a SiteIndex for a file or a directory.

    Raises:
        FileNotFoundError: the path does not exist
    """
    target = Path(path)
    logger.info(f"Indexing site at: {target}")
    if not target.exists():
        raise FileNotFoundError(f"No such file or directory: '{target}'")

    if target.is_file():
        root_dir = str(target.parent)
        if not is_supported(target):
            logger.info(f"Unsupported file type, nothing to index: {target.name}")
            return SiteIndex(root_dir=root_dir)
        files = [str(target)]
    else:
        root_dir = str(target)
        files = discover_files(target)

    records: List[KnowledgeRecord] = []
    for file in files:
        try:
            content = read_document(file)
        except OSError as e:
            logger.warning(f"Skipping unreadable file {file}: {e}")
            continue
        if is_markup(file):
            records.append(index_html(file, content))
        else:
            records.append(index_text(file, content, max_lines))

    logger.info(f"Site indexing completed: {len(files)} files, {len(records)} records")
    return SiteIndex(root_dir=root_dir, files=files, records=records)
