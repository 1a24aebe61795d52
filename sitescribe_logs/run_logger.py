"""
Run Logger - Markdown report for one processed command

Provides:
- Table of Contents generation
- Site index summary
- LLM prompt / response logging
- Action and result tables
"""

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


class RunLogger:
    """
    Markdown run logger for step-by-step diagnostics (with TOC).

    Usage:
        logger = RunLogger(
            command="change heading to Welcome",
            path="./site",
            command_line='sitescribe ./site "change heading to Welcome"'
        )

        logger.log_heading("Index")
        logger.log_kv("Documents", "3")
        logger.log_action_results([r.to_dict() for r in results])
        logger.finalize(success=True, duration_ms=12)
    """

    TOC_START = "<!-- TOC -->"
    TOC_END = "<!-- /TOC -->"

    def __init__(
        self,
        command: str,
        path: Optional[str],
        command_line: Optional[str] = None,
        log_dir: str = "./logs",
        session_id: Optional[str] = None
    ):
        """
        Initialize the run logger.

        Args:
            command: The natural-language command being processed
            path: Site folder or file the command targets
            command_line: Full CLI command
            log_dir: Directory for log files
            session_id: Optional session ID (auto-generated if not provided)
        """
        self.session_id = session_id or datetime.now().strftime('%Y%m%d-%H%M%S')
        self.dir = Path(log_dir)
        self.dir.mkdir(parents=True, exist_ok=True)
        self.path = self.dir / f'run-{self.session_id}.md'

        self._toc: List[str] = []

        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(f"# SiteScribe Run Log ({self.session_id})\n\n")
            f.write("## Navigation\n\n")
            f.write(f"{self.TOC_START}\n(no sections yet)\n{self.TOC_END}\n\n")
            if command_line:
                f.write(f"```bash\n{command_line}\n```\n\n")
            if path:
                f.write(f"- **Path**: {path}\n")
            if command:
                f.write(f"- **Command**: {command}\n\n")

    def _write(self, text: str):
        """Append text to log file"""
        with open(self.path, 'a', encoding='utf-8') as f:
            f.write(text)

    def log_heading(self, text: str):
        """Log a section heading with TOC entry"""
        self._write("\n---\n\n")
        self._write(f"## {text}\n\n")
        self._toc.append(text)
        self._update_toc()

    def log_text(self, text: str):
        """Log a paragraph of text"""
        self._write(f"{text}\n\n")

    def log_kv(self, key: str, value: str):
        """Log a key-value pair"""
        self._write(f"- {key}: {value}\n")

    def log_code(self, lang: str, code: str):
        """Log a code block"""
        self._write(f"```{lang}\n{code}\n```\n\n")

    def log_table(self, headers: List[str], rows: List[List[str]], title: str = ""):
        """
        Log a Markdown table.

        Args:
            headers: List of column headers
            rows: List of rows, each row is a list of cell values
            title: Optional title above the table
        """
        if title:
            self._write(f"### {title}\n\n")

        if not headers or not rows:
            return

        col_widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                if i < len(col_widths):
                    col_widths[i] = max(col_widths[i], len(str(cell)))

        header_line = "| " + " | ".join(h.ljust(col_widths[i]) for i, h in enumerate(headers)) + " |"
        self._write(header_line + "\n")
        sep_line = "|" + "|".join("-" * (w + 2) for w in col_widths) + "|"
        self._write(sep_line + "\n")

        for row in rows:
            padded_row = list(row) + [""] * (len(headers) - len(row))
            row_line = "| " + " | ".join(
                str(c).replace("|", "\\|").ljust(col_widths[i]) for i, c in enumerate(padded_row[:len(headers)])
            ) + " |"
            self._write(row_line + "\n")

        self._write("\n")

    def log_json(self, data: Any, title: str = "Data"):
        """Log JSON data"""
        self._write(f"### {title}\n\n")
        self._write(f"```json\n{json.dumps(data, indent=2, ensure_ascii=False)}\n```\n\n")

    def log_action_results(self, results: List[Dict[str, Any]]):
        """Log one table row per executed action"""
        rows = []
        for r in results:
            status = r.get("status", "")
            icon = {"modified": "✅", "no_change": "ℹ️", "error": "❌"}.get(status, "")
            rows.append([
                r.get("action", ""),
                r.get("file") or "",
                _shorten(r.get("selector") or "", 40),
                f"{icon} {status}".strip(),
                _shorten(r.get("message", ""), 60),
            ])
        self.log_table(["Action", "File", "Selector", "Status", "Message"], rows, "Results")

    def log_success(self, message: str):
        self._write(f"✅ **SUCCESS:** {message}\n\n")

    def log_error(self, message: str):
        self._write(f"❌ **ERROR:** {message}\n\n")

    def log_warning(self, message: str):
        self._write(f"⚠️ **WARNING:** {message}\n\n")

    def finalize(self, success: bool, duration_ms: int = 0, error: Optional[str] = None):
        """
        Finalize the log with summary.

        Args:
            success: Whether the command was processed
            duration_ms: Total processing time
            error: Error message if failed
        """
        self.log_heading("Summary")
        status = "✅ SUCCESS" if success else "❌ FAILED"
        self._write(f"**Status:** {status}\n")
        self._write(f"**Duration:** {duration_ms}ms\n")
        if error:
            self._write(f"\n**Error:** {error}\n")
        self._write("\n")

    # --- Helpers ---
    def _slugify(self, text: str) -> str:
        """Convert text to URL-safe slug"""
        s = text.strip().lower()
        s = re.sub(r"[^a-z0-9\s-]", "", s)
        s = re.sub(r"\s+", "-", s)
        return s

    def _update_toc(self):
        """Rewrite the table of contents between its markers"""
        content = self.path.read_text(encoding='utf-8')
        toc_md = "\n".join(f"- [{title}](#{self._slugify(title)})" for title in self._toc)
        start = content.find(self.TOC_START)
        end = content.find(self.TOC_END)
        if start == -1 or end == -1:
            return
        content = content[:start + len(self.TOC_START)] + "\n" + toc_md + "\n" + content[end:]
        self.path.write_text(content, encoding='utf-8')

    @property
    def log_path(self) -> str:
        """Get the path to the log file"""
        return str(self.path)


def _shorten(value: str, limit: int) -> str:
    value = str(value)
    return value[:limit] + ("..." if len(value) > limit else "")


def create_run_logger(
    command: str,
    path: Optional[str] = None,
    command_line: Optional[str] = None,
    log_dir: str = "./logs"
) -> RunLogger:
    """Create a new run logger instance"""
    return RunLogger(
        command=command,
        path=path,
        command_line=command_line,
        log_dir=log_dir
    )
