from __future__ import annotations
import json, os, tempfile
from typing import Dict

from sellerdesk.viewmodels.form_config import default_form_settings_payload


class StorageLocal:
    """Local filesystem storage for form settings (JSON)."""

    SETTINGS_FILE = "form_settings.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    @property
    def settings_path(self) -> str:
        return os.path.join(self.root, self.SETTINGS_FILE)

    def load_form_settings(self) -> Dict:
        """Return persisted settings, or the defaults when nothing was saved yet."""
        path = self.settings_path
        if not os.path.exists(path):
            return default_form_settings_payload()
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, dict):
            raise ValueError(f"{path} does not contain a JSON object.")
        return payload

    def save_form_settings(self, payload: Dict) -> None:
        os.makedirs(self.root, exist_ok=True)
        # write to a sibling temp file first so a crash never leaves half a file
        fd, tmp_path = tempfile.mkstemp(prefix="form_settings_", suffix=".tmp", dir=self.root)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tmp_path, self.settings_path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
