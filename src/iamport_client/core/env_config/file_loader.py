"""
Configuration file loader for YAML and JSON files.
"""

import json
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from ..config import IamportClientOptions
from ..exceptions import ConfigValidationError


class ConfigFileLoader:
    """
    Загрузчик опций клиента из файлов.

    ``section`` - путь через ':' до вложенного объекта с опциями
    (ключи сравниваются без учёта регистра).

    Examples:
        >>> options = ConfigFileLoader.from_yaml("iamport.yaml")
        >>> options = ConfigFileLoader.from_file(
        ...     "config.json", section="AppSettings:Iamport:IamportHttpClientOptions"
        ... )
    """

    @staticmethod
    def from_yaml(path: Union[str, Path], section: Optional[str] = None) -> IamportClientOptions:
        """
        Загрузить опции из YAML файла.

        Raises:
            FileNotFoundError: Если файл не найден
            ConfigValidationError: Если файл невалидный или секции нет
            ImportError: Если PyYAML не установлен
        """
        try:
            import yaml
        except ImportError:
            raise ImportError(
                "PyYAML is required to load YAML configs. "
                "Install it with: pip install pyyaml"
            )

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax in {path}: {e}")

        return ConfigFileLoader._build_options(data, str(path), section)

    @staticmethod
    def from_json(path: Union[str, Path], section: Optional[str] = None) -> IamportClientOptions:
        """
        Загрузить опции из JSON файла.

        Raises:
            FileNotFoundError: Если файл не найден
            ConfigValidationError: Если файл невалидный или секции нет
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON syntax in {path}: {e}")

        return ConfigFileLoader._build_options(data, str(path), section)

    @staticmethod
    def from_file(path: Union[str, Path], section: Optional[str] = None) -> IamportClientOptions:
        """
        Автоопределение формата по расширению (.yaml, .yml, .json).

        Raises:
            ValueError: Если формат не поддерживается
        """
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix in (".yaml", ".yml"):
            return ConfigFileLoader.from_yaml(path, section)
        elif suffix == ".json":
            return ConfigFileLoader.from_json(path, section)
        else:
            raise ValueError(
                f"Unsupported config file format: {suffix}. "
                f"Supported formats: .yaml, .yml, .json"
            )

    @staticmethod
    def _build_options(data: Any, source: str, section: Optional[str]) -> IamportClientOptions:
        if not data:
            raise ConfigValidationError(f"Empty config file: {source}")

        node = data
        for part in (section.split(":") if section else []):
            if not isinstance(node, Mapping):
                raise ConfigValidationError(f"Section '{section}' not found in {source}")
            match = next((k for k in node if str(k).lower() == part.lower()), None)
            if match is None:
                raise ConfigValidationError(f"Section '{section}' not found in {source}")
            node = node[match]

        if not isinstance(node, Mapping):
            raise ConfigValidationError(
                f"Expected a mapping of options in {source}, got {type(node).__name__}"
            )

        return IamportClientOptions.from_mapping(node)
