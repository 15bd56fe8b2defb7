import json

import pytest

PACKAGE_JSON = {
    "name": "mac-metrics",
    "private": True,
    "version": "0.1.0",
    "type": "module",
    "scripts": {"dev": "vite", "tauri": "tauri"},
    "dependencies": {"@tauri-apps/api": "^2"},
}

TAURI_CONF = {
    "$schema": "https://schema.tauri.app/config/2",
    "productName": "Mac Metrics",
    "version": "0.1.0",
    "identifier": "com.example.macmetrics",
    "app": {"windows": [], "trayIcon": {"iconAsTemplate": True}},
}

CARGO_TOML = """[package]
name = "mac-metrics"
version = "0.1.0"
description = "Menu bar system metrics"
edition = "2021"

[dependencies]
tauri = { version = "2", features = ["tray-icon"] }
serde = { version = "1", features = ["derive"] }
"""


@pytest.fixture
def tauri_project(tmp_path):
    """A project root with the three default version targets at 0.1.0"""

    (tmp_path / "src-tauri").mkdir()
    (tmp_path / "package.json").write_text(json.dumps(PACKAGE_JSON, indent=2) + "\n", encoding="utf-8")
    (tmp_path / "src-tauri" / "tauri.conf.json").write_text(json.dumps(TAURI_CONF, indent=2) + "\n", encoding="utf-8")
    (tmp_path / "src-tauri" / "Cargo.toml").write_text(CARGO_TOML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def snapshot():
    """Return a function capturing the raw bytes of every file under a directory"""

    def _snapshot(root):
        return {
            str(path.relative_to(root)): path.read_bytes()
            for path in sorted(root.rglob("*"))
            if path.is_file()
        }

    return _snapshot
