# tests/conftest.py
import os

import pytest
from dotenv import load_dotenv

from assertation.utils.constants import EnvVars


def pytest_addoption(parser):
    parser.addoption(
        "--envfile",
        action="store",
        default=".env.tests",
        help="Specify the .env file to load for tests",
    )


def pytest_configure(config):
    os.environ["IS_TESTING"] = "true"  # Set early
    env_file = config.getoption("--envfile")
    load_dotenv(env_file, override=True)


@pytest.fixture(autouse=True)
def clean_assertation_env(monkeypatch):
    """Keep ASSERTATION_* variables from leaking between tests."""
    for name in vars(EnvVars).values():
        if isinstance(name, str) and name.startswith("ASSERTATION_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def validator():
    """Accumulating context with the default English messages."""
    from assertation import Assert

    return Assert()


@pytest.fixture
def strict_validator():
    """Context that raises at the first failing check."""
    from assertation import Assert

    return Assert(throw_early=True)


@pytest.fixture
def recording_translator():
    """Translator that records every (key, context) it is asked for."""
    from assertation.translation import Translator

    class RecordingTranslator(Translator):
        def __init__(self):
            self.calls = []

        def translate(self, key, context=None):
            self.calls.append((key, dict(context or {})))
            return None

    return RecordingTranslator()


@pytest.fixture
def catalog_file(tmp_path):
    """A two-locale YAML message catalog."""
    path = tmp_path / "messages.yaml"
    path.write_text(
        "en:\n"
        "  gte: 'must be at least {x}'\n"
        "  validate: 'Invalid data'\n"
        "pt:\n"
        "  gte: 'deve ser maior ou igual a {x}'\n"
        "  req: 'é obrigatório'\n",
        encoding="utf-8",
    )
    return path
