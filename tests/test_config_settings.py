"""
Tests for sequtils/config/settings.py and its effect on the default random source.
"""

import pytest

from sequtils.config.settings import RandomSettings, Settings, get_settings, reset_settings
from sequtils.utils.randomness import (
    NumpyRandomSource,
    PythonRandomSource,
    build_random_source,
    get_default_random_source,
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove sequtils variables so tests start from defaults."""
    monkeypatch.delenv("SEQUTILS_RANDOM_BACKEND", raising=False)
    monkeypatch.delenv("SEQUTILS_RANDOM_SEED", raising=False)
    return monkeypatch


def test_random_settings_defaults(clean_env):
    """Test that an empty environment gives an unseeded numpy backend."""
    settings = RandomSettings.from_env()
    assert settings.backend == "numpy"
    assert settings.seed is None


def test_random_settings_from_env(clean_env):
    """Test that backend and seed are read from the environment."""
    clean_env.setenv("SEQUTILS_RANDOM_BACKEND", "Python")
    clean_env.setenv("SEQUTILS_RANDOM_SEED", "1234")

    settings = RandomSettings.from_env()
    assert settings.backend == "python"
    assert settings.seed == 1234


def test_random_settings_empty_seed_means_unseeded(clean_env):
    """Test that an empty seed variable is treated as unset."""
    clean_env.setenv("SEQUTILS_RANDOM_SEED", "  ")
    assert RandomSettings.from_env().seed is None


def test_random_settings_rejects_non_integer_seed(clean_env):
    """Test that a non-integer seed fails with the variable name in the message."""
    clean_env.setenv("SEQUTILS_RANDOM_SEED", "abc")
    with pytest.raises(ValueError, match="SEQUTILS_RANDOM_SEED"):
        RandomSettings.from_env()


def test_random_settings_rejects_negative_seed():
    """Test that negative seeds are rejected at construction."""
    with pytest.raises(ValueError, match="SEQUTILS_RANDOM_SEED"):
        RandomSettings(seed=-1)


def test_random_settings_rejects_unknown_backend():
    """Test that unknown backends are rejected at construction."""
    with pytest.raises(ValueError, match="SEQUTILS_RANDOM_BACKEND"):
        RandomSettings(backend="mersenne")


def test_settings_are_frozen():
    """Test that settings objects are immutable."""
    settings = Settings()
    with pytest.raises(AttributeError):
        settings.random = RandomSettings(seed=1)


def test_get_settings_is_cached_until_reset(clean_env):
    """Test lazy caching and reset of the settings singleton."""
    first = get_settings()
    assert get_settings() is first

    clean_env.setenv("SEQUTILS_RANDOM_SEED", "9")
    assert get_settings().random.seed is None

    reset_settings()
    assert get_settings().random.seed == 9


def test_build_random_source_backends():
    """Test that the backend setting selects the source class."""
    assert isinstance(build_random_source(RandomSettings()), NumpyRandomSource)
    assert isinstance(build_random_source(RandomSettings(backend="python")), PythonRandomSource)


def test_default_source_uses_configured_seed(clean_env):
    """Test that SEQUTILS_RANDOM_SEED makes the default source reproducible."""
    clean_env.setenv("SEQUTILS_RANDOM_SEED", "31")

    source = get_default_random_source()
    reference = NumpyRandomSource(31)

    assert [source.random() for _ in range(5)] == [reference.random() for _ in range(5)]


def test_default_source_python_backend(clean_env):
    """Test that the python backend is honoured by the default source."""
    clean_env.setenv("SEQUTILS_RANDOM_BACKEND", "python")
    clean_env.setenv("SEQUTILS_RANDOM_SEED", "31")

    source = get_default_random_source()
    reference = PythonRandomSource(31)

    assert isinstance(source, PythonRandomSource)
    assert [source.random() for _ in range(5)] == [reference.random() for _ in range(5)]


def test_random_settings_read_dotenv_from_working_directory(clean_env, tmp_path):
    """Test that a .env file in the working directory is read when settings load."""
    (tmp_path / ".env").write_text("SEQUTILS_RANDOM_SEED=77\n")
    clean_env.chdir(tmp_path)
    # Registered so monkeypatch also removes the value that load_dotenv sets
    clean_env.setenv("SEQUTILS_RANDOM_SEED", "unused")
    clean_env.delenv("SEQUTILS_RANDOM_SEED")

    assert RandomSettings.from_env().seed == 77


def test_environment_overrides_dotenv(clean_env, tmp_path):
    """Test that an exported variable wins over the .env value."""
    (tmp_path / ".env").write_text("SEQUTILS_RANDOM_SEED=77\n")
    clean_env.chdir(tmp_path)
    clean_env.setenv("SEQUTILS_RANDOM_SEED", "5")

    assert RandomSettings.from_env().seed == 5
