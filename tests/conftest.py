import logging

import pytest

from humanhash import config


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    """Prevent tests from picking up a configuration file of the user running them."""
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "missing" / "config.toml")


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.getLogger("humanhash").setLevel(logging.CRITICAL)


@pytest.fixture
def write_wordlist(tmp_path):
    def write(words, name="words.txt"):
        path = tmp_path / name
        path.write_text("\n".join(words) + "\n", encoding="utf-8")
        return path

    return write
