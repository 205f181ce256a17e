from ttyenum.config.loader import ConfigError, ConfigIssue, load_config, validate_config
from ttyenum.config.schema import TtyEnumConfig

__all__ = ["ConfigError", "ConfigIssue", "TtyEnumConfig", "load_config", "validate_config"]
