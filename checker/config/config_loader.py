import os
import yaml
from pathlib import Path

# Central config loader. Simple singleton so the rest of the code can just do:
#   from checker.config.config_loader import config
# and not worry about re-reading YAML. CLI flags still win over anything here.
# A broken file never raises at import: built-in defaults apply and the problem
# is kept in LOAD_ERROR so the check can report it as UNKNOWN.

DEFAULT_PROBE_SETTINGS = {
    'url': 'http://localhost:9200',
    'timeout': 20,
    'time_period': 5,
    'index_pattern': 'logstash-*',
    'query': '*',
    'compare_operator': 'gt',
}


class Config:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._load_yaml_configs()
            cls._instance._set_values()
        return cls._instance

    def _load_yaml_configs(self):
        default_path = Path(__file__).resolve().parent / 'probe_config.yaml'
        self.CONFIG_PATH = Path(os.environ.get('ES_LOGS_COUNT_CONFIG', default_path))
        self.LOAD_ERROR = None

        # Installed copies may ship without the YAML; built-in defaults apply then
        self.probe = {}
        if not self.CONFIG_PATH.exists():
            return
        try:
            with open(self.CONFIG_PATH, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            self.LOAD_ERROR = f"cannot load config {self.CONFIG_PATH}: {exc}"
            return

        if not isinstance(loaded, dict):
            self.LOAD_ERROR = f"config {self.CONFIG_PATH} must be a mapping"
            return
        self.probe = loaded

    def _section(self, name):
        section = self.probe.get(name) or {}
        if not isinstance(section, dict):
            self.LOAD_ERROR = f"config {self.CONFIG_PATH}: '{name}' must be a mapping"
            return {}
        return section

    def _set_values(self):
        defaults_section = self._section('defaults')
        self.PROBE_DEFAULTS = dict(DEFAULT_PROBE_SETTINGS)
        for key in DEFAULT_PROBE_SETTINGS:
            if defaults_section.get(key) is not None:
                self.PROBE_DEFAULTS[key] = defaults_section[key]

        logging_section = self._section('logging')
        self.LOG_LEVEL = str(logging_section.get('level', 'WARNING')).upper()
        self.LOG_FORMAT = logging_section.get(
            'format', "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        # None keeps records on stderr; stdout is reserved for the status line
        self.LOG_FILE = logging_section.get('file')

# Singleton instance
config = Config()
