"""Tests for the sample rendering script."""

import sys

import pytest

import render_samples
from identicon.engine import render
from tests.conftest import DEFAULT_HASH, SAMPLE_HASH


def test_output_name():
    assert render_samples.output_name(SAMPLE_HASH, 3) == f"{SAMPLE_HASH}.png"
    assert render_samples.output_name("../etc/passwd-and-more", 3) == "identicon-3.png"


def test_read_hashes(tmp_path):
    path = tmp_path / "hashes.txt"
    path.write_text(f"# comment\n{SAMPLE_HASH}\n\n  # indented note\n  {DEFAULT_HASH}  \n", encoding="utf-8")
    assert render_samples.read_hashes(str(path)) == [SAMPLE_HASH, DEFAULT_HASH]


def test_main_writes_pngs(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["render_samples.py", SAMPLE_HASH, "-o", str(tmp_path), "-s", "40"])
    render_samples.main()
    assert (tmp_path / f"{SAMPLE_HASH}.png").read_bytes() == render(SAMPLE_HASH, 40).data


def test_main_fails_on_bad_size(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["render_samples.py", SAMPLE_HASH, "-o", str(tmp_path), "-s", "-3"])
    with pytest.raises(SystemExit) as exc:
        render_samples.main()
    assert exc.value.code == 1
