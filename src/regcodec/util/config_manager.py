import os
import re

import yaml

from regcodec.schema.register_schema import RegisterDefinition, RegisterMapConfig


class ConfigManager:

    @staticmethod
    def load_yaml_file(path: str) -> dict:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def parse_env_var_with_default(value: str) -> bool | int | float | str | None:
        match = re.match(r"\$\{(\w+)(?::-([^\}]*))?\}", value)  # Match ${VAR_NAME:-default} or ${VAR_NAME}
        if not match:
            return value

        var_name = match.group(1)
        default_value = match.group(2)

        resolved_value = os.getenv(var_name) or default_value
        if resolved_value is not None:
            return ConfigManager._parse_value_by_type(resolved_value)
        return None

    @staticmethod
    def load_register_map(config_path: str) -> RegisterMapConfig:
        """Load and validate a register map"""
        raw_config = ConfigManager.load_yaml_file(config_path)
        return RegisterMapConfig(**ConfigManager._resolve_env_vars(raw_config))

    @staticmethod
    def get_register(config: RegisterMapConfig, name: str) -> RegisterDefinition | None:
        return config.registers.get(name)

    @staticmethod
    def _resolve_env_vars(node):
        if isinstance(node, dict):
            return {k: ConfigManager._resolve_env_vars(v) for k, v in node.items()}
        if isinstance(node, list):
            return [ConfigManager._resolve_env_vars(v) for v in node]
        if isinstance(node, str):
            return ConfigManager.parse_env_var_with_default(node)
        return node

    @staticmethod
    def _parse_value_by_type(value: str) -> bool | int | float | str:
        if value.lower() in ["true", "false"]:
            return value.lower() == "true"
        if ConfigManager._is_int(value):
            return int(value)
        if ConfigManager._is_float(value):
            return float(value)
        return value

    @staticmethod
    def _is_int(value: str) -> bool:
        try:
            int(value)
            return True
        except ValueError:
            return False

    @staticmethod
    def _is_float(value: str) -> bool:
        try:
            float(value)
            return True
        except ValueError:
            return False
