"""Unit tests for configuration loading."""

from boundcache.utils.config import AppConfig, CacheConfig, ReporterConfig, ServerConfig


class TestAppConfig:
    """Test AppConfig loading."""

    def test_defaults(self):
        """Test default configuration values."""
        config = AppConfig()

        assert config.cache == CacheConfig(capacity=1000, ttl_seconds=60.0, sweep_interval_seconds=60.0)
        assert config.reporter == ReporterConfig(enabled=True, interval_seconds=5.0)
        assert config.server.port == 3000

    def test_from_dict_builds_sections(self):
        """Test nested dicts fill each section, missing keys keep defaults."""
        config = AppConfig.from_dict(
            {
                "cache": {"capacity": 10, "ttl_seconds": 5},
                "reporter": {"enabled": False},
            }
        )

        assert config.cache.capacity == 10
        assert config.cache.ttl_seconds == 5
        assert config.cache.sweep_interval_seconds == 60.0
        assert config.reporter.enabled is False
        assert config.server == ServerConfig()

    def test_from_env(self):
        """Test environment variables override defaults."""
        config = AppConfig.from_env(
            {
                "BOUNDCACHE_CAPACITY": "25",
                "BOUNDCACHE_TTL_SECONDS": "1.5",
                "BOUNDCACHE_SWEEP_INTERVAL": "2",
                "BOUNDCACHE_REPORT_ENABLED": "no",
                "BOUNDCACHE_REPORT_INTERVAL": "30",
                "HOST": " 0.0.0.0 ",
                "PORT": "8080",
            }
        )

        assert config.cache == CacheConfig(capacity=25, ttl_seconds=1.5, sweep_interval_seconds=2.0)
        assert config.reporter == ReporterConfig(enabled=False, interval_seconds=30.0)
        assert config.server.host == "0.0.0.0"
        assert config.server.port == 8080

    def test_from_env_malformed_values_fall_back(self):
        """Test unparseable environment values fall back to defaults."""
        config = AppConfig.from_env({"BOUNDCACHE_CAPACITY": "lots", "PORT": "http", "BOUNDCACHE_TTL_SECONDS": ""})

        assert config.cache.capacity == 1000
        assert config.cache.ttl_seconds == 60.0
        assert config.server.port == 3000

    def test_from_env_empty_mapping_is_defaults(self):
        """Test an empty environment yields the defaults."""
        assert AppConfig.from_env({}) == AppConfig()
