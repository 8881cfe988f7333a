"""Config settings – 12-factor env-based configuration."""
from mp_query_timeout.config.settings.env import EnvSettingsLoader, Settings, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
