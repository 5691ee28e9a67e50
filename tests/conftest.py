"""Shared fixtures for launchcheck test suite."""
import json
import os
import tempfile

import pytest


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory, cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def sample_marker():
    """Return a minimal valid marker dict."""
    return {
        "vertical": "hvac",
        "name": "Acme",
        "category": "home-services",
        "initializedAt": "2024-01-01",
    }


def write_file(root, rel_path, content=""):
    """Write content to root/rel_path, creating parent directories."""
    path = os.path.join(root, *rel_path.split("/"))
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path


@pytest.fixture
def make_workspace(tmp_dir, sample_marker):
    """Build a workspace under tmp_dir.

    Defaults produce a fully passing workspace; pass False/None to leave a
    file out, or a string to set its contents.
    """
    def _make(
        marker=True,
        vertical_config="export const vertical = { id: 'hvac' };\n",
        site_config="export const siteConfig = { name: 'Acme Heating' };\n",
        favicon=True,
        logo=True,
        og_image=True,
    ):
        if marker is True:
            write_file(tmp_dir, ".vertical", json.dumps(sample_marker))
        elif isinstance(marker, str):
            write_file(tmp_dir, ".vertical", marker)
        elif isinstance(marker, dict):
            write_file(tmp_dir, ".vertical", json.dumps(marker))
        if vertical_config is not None:
            write_file(tmp_dir, "src/config/vertical.ts", vertical_config)
        if site_config is not None:
            write_file(tmp_dir, "src/config/site.ts", site_config)
        if favicon:
            write_file(tmp_dir, "public/favicon.svg", "<svg/>")
        if logo:
            write_file(tmp_dir, "public/images/logo.png", "png")
        if og_image:
            write_file(tmp_dir, "public/og-image.png", "png")
        return tmp_dir

    return _make


@pytest.fixture
def write():
    """Expose write_file to tests."""
    return write_file
