# File: ConfigLoader.py
import yaml
from pathlib import Path
from typing import Dict, Type, Union
from Configuration import ChannelConfig
import logging

logger = logging.getLogger(__name__)

class ConfigLoader:
    def __init__(self, settings: Type[ChannelConfig] = ChannelConfig):
        self.settings = settings

    def load_scheme_aliases(self, file_path: Union[str, Path]) -> Dict[str, str]:
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                root = yaml.safe_load(f)
        except FileNotFoundError:
            logger.warning(f"Configuration file not found: {file_path}. Using no scheme aliases.")
            return {}
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML file {file_path}: {e}")
            return {}
        except OSError as e:
            logger.error(f"Error loading configuration file {file_path}: {e}")
            return {}

        if root is None:
            return {}
        if not isinstance(root, dict):
            logger.warning(f"Configuration YAML {file_path} root is not a dict: {type(root)}")
            return {}

        data = root.get(self.settings.SCHEME_ALIASES_YAML_KEY, {})
        if not isinstance(data, dict):
            logger.warning(f"Key '{self.settings.SCHEME_ALIASES_YAML_KEY}' is not a mapping in {file_path}")
            return {}

        aliases = {}
        for alias, scheme in data.items():
            if isinstance(alias, str) and isinstance(scheme, str):
                aliases[alias] = scheme
            else:
                logger.warning(f"Ignoring scheme alias that is not a string pair: {alias!r} -> {scheme!r}")
        logger.info(f"Loaded {len(aliases)} scheme aliases from {file_path}")
        return aliases
