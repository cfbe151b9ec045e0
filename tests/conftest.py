"""Pytest configuration and fixtures for the test suite."""

from pathlib import Path

import cv2
import numpy as np
import pytest

from receipt_budget_sync.core import ocr, processor
from receipt_budget_sync.core.models import Credentials


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("RECEIPTS_DIR", "YNAB_CREDENTIALS_FILE", "YNAB_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(access_token="token-123", budget_id="budget-1", account_id="account-1")


@pytest.fixture
def credentials_file(tmp_path: Path) -> Path:
    path = tmp_path / "credentials.txt"
    path.write_text("token-123\nbudget-1\naccount-1\n", encoding="utf-8")
    return path


@pytest.fixture
def receipts_dir(tmp_path: Path) -> Path:
    path = tmp_path / "receipts"
    path.mkdir()
    return path


def write_image(path: Path, value: int = 255) -> Path:
    """Write a small solid-color PNG/JPEG that OpenCV can decode."""
    img = np.full((20, 40, 3), value, dtype=np.uint8)
    assert cv2.imwrite(path.as_posix(), img)
    return path


def write_corrupt(path: Path) -> Path:
    path.write_bytes(b"this is not an image")
    return path


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "{}"):
        self.status_code = status_code
        self.text = text


@pytest.fixture
def fake_ocr(monkeypatch):
    """
    Replace Tesseract with canned text per file name.

    Images are still decoded with OpenCV, so corrupt files fail the same way
    they would in a real run.
    """
    texts = {}
    calls = []

    def _ocr_receipt(path):
        calls.append(path.name)
        ocr.load_image(path)
        return texts.get(path.name, "")

    monkeypatch.setattr(processor, "ocr_receipt", _ocr_receipt)
    _ocr_receipt.texts = texts
    _ocr_receipt.calls = calls
    return _ocr_receipt
