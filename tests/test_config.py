import pytest

from hashmap_cache.utils.config import load_config


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch restores the variables as absent afterwards
    for name in ("CACHE_CAPACITY", "DEMO_VERBOSE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("", encoding="utf-8")
    cfg = load_config(str(env_file))
    assert cfg.cache_capacity == 3
    assert cfg.verbose is False


def test_reads_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CACHE_CAPACITY=7\nDEMO_VERBOSE=1\n", encoding="utf-8")
    cfg = load_config(str(env_file))
    assert cfg.cache_capacity == 7
    assert cfg.verbose is True


def test_process_env_wins_over_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CACHE_CAPACITY=7\n", encoding="utf-8")
    clean_env.setenv("CACHE_CAPACITY", "2")
    assert load_config(str(env_file)).cache_capacity == 2


def test_invalid_capacity(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("", encoding="utf-8")
    clean_env.setenv("CACHE_CAPACITY", "lots")
    with pytest.raises(ValueError, match="CACHE_CAPACITY"):
        load_config(str(env_file))
