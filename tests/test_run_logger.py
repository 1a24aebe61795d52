"""
Tests for the Markdown run logger.
"""

from sitescribe_logs import RunLogger, create_run_logger


def make_logger(tmp_path, **kwargs):
    return RunLogger(
        command="change heading to Welcome",
        path="./site",
        command_line='sitescribe ./site "change heading to Welcome"',
        log_dir=str(tmp_path / "logs"),
        session_id="test",
        **kwargs,
    )


def read(run_logger):
    with open(run_logger.log_path, encoding="utf-8") as f:
        return f.read()


def test_header(tmp_path):
    run_logger = make_logger(tmp_path)

    content = read(run_logger)

    assert run_logger.log_path.endswith("run-test.md")
    assert content.startswith("# SiteScribe Run Log (test)")
    assert "(no sections yet)" in content
    assert "- **Command**: change heading to Welcome" in content
    assert '```bash\nsitescribe ./site "change heading to Welcome"\n```' in content


def test_toc_tracks_every_heading(tmp_path):
    run_logger = make_logger(tmp_path)

    run_logger.log_heading("Index")
    run_logger.log_heading("LLM Planner")

    content = read(run_logger)
    assert "(no sections yet)" not in content
    toc = content.split("<!-- TOC -->")[1].split("<!-- /TOC -->")[0]
    assert "- [Index](#index)" in toc
    assert "- [LLM Planner](#llm-planner)" in toc


def test_table_escapes_pipes(tmp_path):
    run_logger = make_logger(tmp_path)

    run_logger.log_table(["Selector"], [["a | b"]], title="Rows")

    content = read(run_logger)
    assert "### Rows" in content
    assert "a \\| b" in content


def test_empty_table_writes_only_title(tmp_path):
    run_logger = make_logger(tmp_path)
    run_logger.log_table(["A"], [], title="Nothing")
    assert read(run_logger).rstrip().endswith("### Nothing")


def test_action_results(tmp_path):
    run_logger = make_logger(tmp_path)

    run_logger.log_action_results([
        {"action": "changeText", "file": "index.html", "selector": "h1", "status": "modified",
         "message": "Successfully applied changes"},
        {"action": "changeTheme", "file": None, "selector": None, "status": "no_change",
         "message": "Theme changed to dark"},
    ])

    content = read(run_logger)
    assert "### Results" in content
    assert "✅ modified" in content
    assert "ℹ️ no_change" in content


def test_finalize(tmp_path):
    run_logger = make_logger(tmp_path)

    run_logger.finalize(success=False, duration_ms=42, error="boom")

    content = read(run_logger)
    assert "- [Summary](#summary)" in content
    assert "❌ FAILED" in content
    assert "**Duration:** 42ms" in content
    assert "**Error:** boom" in content


def test_create_run_logger(tmp_path):
    run_logger = create_run_logger("help", log_dir=str(tmp_path))
    assert run_logger.path.parent == tmp_path
    assert "**Path**" not in read(run_logger)
