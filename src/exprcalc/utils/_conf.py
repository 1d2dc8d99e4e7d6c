import configparser
import logging
import os

from exprcalc._version import version

logger = logging.getLogger("exprcalc.utils.conf")

ENV_PREFIX = "EXPRCALC_"

CONFIG_FILES = [
    "~/.exprcalcrc",  # User-specific config
    "/etc/exprcalc.ini",  # System-wide config
    "exprcalc.ini",  # Local directory config
]


class ConfigSection:
    """Wrapper for a config section to allow attribute-style access to options."""

    def __init__(self, section):
        self._section = section

    def __getattr__(self, name):
        if name in self._section:
            return self._section[name]
        raise AttributeError(f"No option '{name}' in this section")

    def __getitem__(self, key):
        return self._section[key]

    def get(self, option, fallback=None):
        return self._section.get(option, fallback)


class ConfMod:
    def __init__(self, name, config_files=None):
        self.__name__ = name
        self.reload(config_files)

    def reload(self, config_files=None):
        """(re)read defaults, config files and EXPRCALC_* environment variables"""
        if config_files is None:
            config_files = [os.path.expanduser(path) for path in CONFIG_FILES]

        default_config = {
            "DEFAULT": {
                "version": f"exprcalc {version}",
            },
            "logging": {
                "log_level": "WARNING",
            },
            "output": {
                "float_precision": "",
            },
        }

        self.config = configparser.ConfigParser()
        self.config.read_dict(default_config)

        found_files = self.config.read(config_files)
        logger.debug(f"found {len(found_files)} config files: {found_files}")

        self._load_from_env()

    def readrc(self, path):
        """read an additional config file, environment variables still win"""
        found_files = self.config.read([path])
        if not found_files:
            raise FileNotFoundError(path)
        self._load_from_env()

    def _load_from_env(self):
        """Load configuration from environment variables.

        Format: EXPRCALC_SECTION_OPTION=value
        Example: EXPRCALC_LOGGING_LOG_LEVEL=debug sets config['logging']['log_level']
        """
        for key, value in os.environ.items():
            if key.startswith(ENV_PREFIX):
                parts = key[len(ENV_PREFIX) :].lower().split("_", 1)
                if len(parts) == 2:
                    section, option = parts
                    if section == "default":
                        section = "DEFAULT"
                    elif not self.config.has_section(section):
                        self.config.add_section(section)
                    self.config[section][option] = value

    def get(self, section, option, fallback=None, type_=str):
        """Get a configuration value with type conversion."""
        try:
            if type_ is bool:
                return self.config.getboolean(section, option)
            elif type_ is int:
                return self.config.getint(section, option)
            elif type_ is float:
                return self.config.getfloat(section, option)
            else:
                return self.config.get(section, option)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def __getattr__(self, name):
        # conf.output.float_precision instead of conf.get('output', 'float_precision')
        if name in self.config:
            return ConfigSection(self.config[name])
        raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

    def __getitem__(self, section):
        return self.config[section]

    @property
    def version(self):
        return self.get("DEFAULT", "version", "")

    @property
    def log_level(self):
        return self.get("logging", "log_level", "WARNING")

    @property
    def float_precision(self):
        """number of significant digits for printing floats, None for repr"""
        value = self.get("output", "float_precision", "")
        if not value:
            return None
        return int(value)
