"""
Configuration System Tests
==========================
Verifies that the configuration management system works correctly.
"""

import os
import sys
import tempfile

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from transcript_split.config import (
    AppConfig,
    SplitConfig,
    get_config,
    set_config,
    reset_config,
    load_config_file,
    apply_environment_overrides,
    get_caption_config,
    get_development_config,
    get_production_config,
)
from transcript_split.models import SplitMode, SplitOptions


def _clear_env(*names):
    saved = {}
    for name in names:
        if name in os.environ:
            saved[name] = os.environ.pop(name)
    return saved


def test_default_config():
    """Test that default configuration is created correctly."""
    reset_config()
    config = get_config()

    assert config is not None
    assert config.splitting.mode == "semantic"
    assert config.splitting.max_duration == 30.0
    assert config.splitting.max_characters == 100
    assert config.splitting.min_characters is None
    assert config.splitting.preserve_speaker is True
    assert config.flask.port == 5000

    print("[PASS] Default configuration test passed")


def test_config_singleton():
    """Test that get_config returns the same instance."""
    reset_config()
    config1 = get_config()
    config2 = get_config()

    assert config1 is config2

    replacement = AppConfig()
    set_config(replacement)
    assert get_config() is replacement

    reset_config()
    print("[PASS] Singleton test passed")


def test_config_serialization():
    """Test configuration save and load."""
    config = AppConfig()
    config.splitting.mode = "time"
    config.splitting.max_duration = 12.5
    config.logging.run_name = "test_run"

    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        temp_path = f.name

    try:
        config.save(temp_path)
        loaded_config = AppConfig.load(temp_path)

        assert loaded_config.splitting.mode == "time"
        assert loaded_config.splitting.max_duration == 12.5
        assert loaded_config.logging.run_name == "test_run"
        assert loaded_config.flask.cors_origins == config.flask.cors_origins

        loaded_global = load_config_file(temp_path)
        assert get_config() is loaded_global

        print("[PASS] Serialization test passed")
    finally:
        os.unlink(temp_path)
        reset_config()


def test_presets():
    """Test preset configurations."""
    captions = get_caption_config()
    assert captions.splitting.mode == "character"
    assert captions.splitting.max_characters == 42
    assert captions.splitting.min_characters == 10

    assert get_development_config().flask.debug is True
    assert get_development_config().logging.log_level == "DEBUG"
    assert get_production_config().logging.log_to_file is True

    print("[PASS] Preset configuration test passed")


def test_options_from_config():
    """Configured defaults become the options used when none are given."""
    options = SplitOptions.from_config(SplitConfig(mode="time", max_duration=20.0))

    assert options.mode == SplitMode.TIME
    assert options.max_duration == 20.0
    assert options.min_characters is None
    assert options.preserve_speaker is True

    print("[PASS] Options from config test passed")


def test_environment_overrides():
    """Test environment variable overrides."""
    saved = _clear_env("PORT", "SPLIT_MODE")

    os.environ["TRANSCRIPT_SPLIT_SPLITTING_MAX_DURATION"] = "12.5"
    os.environ["TRANSCRIPT_SPLIT_SPLITTING_MIN_CHARACTERS"] = "8"
    os.environ["TRANSCRIPT_SPLIT_SPLITTING_PRESERVE_SPEAKER"] = "false"
    os.environ["TRANSCRIPT_SPLIT_FLASK_PORT"] = "8080"
    os.environ["TRANSCRIPT_SPLIT_FLASK_CORS_ORIGINS"] = "http://a.test, http://b.test"

    try:
        config = apply_environment_overrides(AppConfig())

        assert config.splitting.max_duration == 12.5
        assert config.splitting.min_characters == 8
        assert config.splitting.preserve_speaker is False
        assert config.flask.port == 8080
        assert config.flask.cors_origins == ["http://a.test", "http://b.test"]

        print("[PASS] Environment override test passed")
    finally:
        del os.environ["TRANSCRIPT_SPLIT_SPLITTING_MAX_DURATION"]
        del os.environ["TRANSCRIPT_SPLIT_SPLITTING_MIN_CHARACTERS"]
        del os.environ["TRANSCRIPT_SPLIT_SPLITTING_PRESERVE_SPEAKER"]
        del os.environ["TRANSCRIPT_SPLIT_FLASK_PORT"]
        del os.environ["TRANSCRIPT_SPLIT_FLASK_CORS_ORIGINS"]
        os.environ.update(saved)


def test_simplified_environment_overrides():
    """PORT and SPLIT_MODE map onto their config fields."""
    saved = _clear_env("PORT", "SPLIT_MODE")
    os.environ["PORT"] = "9000"
    os.environ["SPLIT_MODE"] = "character"

    try:
        config = apply_environment_overrides(AppConfig())
        assert config.flask.port == 9000
        assert config.splitting.mode == "character"

        print("[PASS] Simplified environment override test passed")
    finally:
        del os.environ["PORT"]
        del os.environ["SPLIT_MODE"]
        os.environ.update(saved)


def test_invalid_environment_override_ignored():
    """Values that fail to convert leave the field unchanged."""
    saved = _clear_env("PORT", "SPLIT_MODE")
    os.environ["TRANSCRIPT_SPLIT_FLASK_PORT"] = "not-a-port"
    os.environ["TRANSCRIPT_SPLIT_SPLITTING_NOT_A_FIELD"] = "1"

    try:
        config = apply_environment_overrides(AppConfig())
        assert config.flask.port == 5000
        assert not hasattr(config.splitting, "not_a_field")

        print("[PASS] Invalid environment override test passed")
    finally:
        del os.environ["TRANSCRIPT_SPLIT_FLASK_PORT"]
        del os.environ["TRANSCRIPT_SPLIT_SPLITTING_NOT_A_FIELD"]
        os.environ.update(saved)


def test_config_to_dict():
    """Test configuration dictionary export."""
    config = AppConfig()
    config_dict = config.to_dict()

    assert isinstance(config_dict, dict)
    assert 'splitting' in config_dict
    assert 'flask' in config_dict
    assert 'logging' in config_dict
    assert config_dict['splitting']['max_characters'] == 100

    print("[PASS] Config to_dict test passed")


def run_all_tests():
    """Run all configuration tests."""
    print("\n" + "="*60)
    print("CONFIGURATION SYSTEM TESTS")
    print("="*60 + "\n")

    test_default_config()
    test_config_singleton()
    test_config_serialization()
    test_presets()
    test_options_from_config()
    test_environment_overrides()
    test_simplified_environment_overrides()
    test_invalid_environment_override_ignored()
    test_config_to_dict()

    print("\n" + "="*60)
    print("ALL CONFIGURATION TESTS PASSED")
    print("="*60 + "\n")


if __name__ == "__main__":
    run_all_tests()
