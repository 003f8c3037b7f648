import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest
import structlog

from xml_formatter.core.config import get_settings
from xml_formatter.formatting.service import get_service
from xml_formatter.samples import SAMPLE_XML


@pytest.fixture(autouse=True)
def reset_global_state(monkeypatch) -> Generator[None, None, None]:
    """Isolate tests from environment settings and cached singletons."""
    for name in ("INDENT_SIZE", "LINE_SEPARATOR", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(f"XML_FORMATTER_{name}", raising=False)
    get_settings.cache_clear()
    get_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_service.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def temp_directory() -> Generator[Path, None, None]:
    """Create temporary directory for test files."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    shutil.rmtree(temp_dir)


@pytest.fixture
def sample_xml() -> str:
    """The bookstore sample document."""
    return SAMPLE_XML


@pytest.fixture
def sample_xml_formatted() -> str:
    """The bookstore sample indented with two spaces."""
    return "\n".join([
        '<?xml version="1.0" encoding="UTF-8"?>',
        "<bookstore>",
        '  <book id="1">',
        "    <title>The Great Gatsby</title>",
        "    <author>F. Scott Fitzgerald</author>",
        '    <price currency="USD">12.99</price>',
        "    <genre>Fiction</genre>",
        "  </book>",
        '  <book id="2">',
        "    <title>To Kill a Mockingbird</title>",
        "    <author>Harper Lee</author>",
        '    <price currency="USD">13.99</price>',
        "    <genre>Fiction</genre>",
        "  </book>",
        "</bookstore>",
    ])


@pytest.fixture
def malformed_xml() -> str:
    """Mismatched closing tag."""
    return "<a><b></a>"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
