from __future__ import annotations

import json
import logging

import pytest

from sellerdesk.app import main as app_main


class _WindowStub:
    def __init__(self, *, on_about=None) -> None:
        self.tab_sellers = object()
        self.tab_departments = object()
        self.toasts = []
        self.mounted = []

    def show_toast(self, message: str) -> None:
        self.toasts.append(message)

    def mount_list(self, view) -> None:
        self.mounted.append(view)


class _ListViewStub:
    def __init__(self, parent, *, title, columns, on_new, on_edit) -> None:
        self.title = title
        self.rows = []

    def set_rows(self, rows) -> None:
        self.rows = list(rows)


@pytest.fixture
def storage_root(tmp_path, monkeypatch):
    monkeypatch.setattr(app_main, "MainWindowView", _WindowStub)
    monkeypatch.setattr(app_main, "EntityListView", _ListViewStub)
    monkeypatch.setattr(app_main, "apply_theme", lambda root: None)
    monkeypatch.setenv("SELLERDESK_STORAGE_ROOT", str(tmp_path))
    monkeypatch.delenv("SELLERDESK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SELLERDESK_DEBUG", raising=False)
    root = logging.getLogger()
    previous = root.level
    yield tmp_path
    root.setLevel(previous)


def test_startup_without_settings_file_reports_ready(storage_root) -> None:
    app = app_main.App()

    assert app.win.toasts == ["Ready."]
    assert app.form_config == app_main.FormConfig()
    assert [row[1] for row in app.department_list_view.rows] == [
        "Computers",
        "Electronics",
        "Fashion",
        "Books",
    ]


def test_invalid_settings_file_leaves_failure_toast_visible(storage_root) -> None:
    (storage_root / "form_settings.json").write_text(json.dumps({"bogus": 1}), encoding="utf-8")

    app = app_main.App()

    assert len(app.win.toasts) == 1
    assert app.win.toasts[-1].startswith("Could not load form settings")
    assert app.form_config == app_main.FormConfig()


def test_persisted_debug_logging_raises_root_verbosity(storage_root) -> None:
    (storage_root / "form_settings.json").write_text(
        json.dumps({"debug_logging": True, "decimal_places": 3}), encoding="utf-8"
    )

    app = app_main.App()

    assert app.form_config.decimal_places == 3
    assert logging.getLogger().level == logging.DEBUG
    assert app.win.toasts == ["Ready."]
