import os
import json
import yaml
import xml.etree.ElementTree as ET
from logging import Logger
from pathlib import Path
from typing import Any, Dict, Optional, Union
from ..errors import ConfigError, RecordNotFoundError, RecordParseError
from .family_config import FamilyPolicy, parse_policies
from .models import FamilyHierarchy, GpioDescriptor, McuRecord
from .parsers import parse_families, parse_gpio_modes, parse_mcu
from .utils import strip_namespaces

FAMILIES_FILE = "families.xml"


class CubeDatabaseLoader:
    """Reads records from a STM32CubeMX MCU database directory (CubeMX/db/mcu)."""

    def __init__(self, logger: Logger, db_dir: Union[str, Path]):
        self.log: Logger = logger
        self.db_dir = Path(db_dir)
        self._gpio_cache: Dict[str, GpioDescriptor] = {}

    def _parse_file(self, relative_path: str) -> ET.Element:
        path = self.db_dir / relative_path
        if not path.is_file():
            self.log.error("Database file does not exist", extra={"path": str(path)})
            raise RecordNotFoundError(f"Could not find {relative_path} in {self.db_dir}", path=str(path))

        try:
            root = ET.parse(str(path)).getroot()
        except ET.ParseError as e:
            self.log.error("Malformed XML tree in database file", extra={"path": str(path)})
            raise RecordParseError(f"Could not parse {relative_path}: {e}", path=str(path)) from e

        self.log.debug("Database file loaded", extra={"path": str(path)})
        return strip_namespaces(root)

    def load_family_hierarchy(self) -> FamilyHierarchy:
        root = self._parse_file(FAMILIES_FILE)
        return parse_families(root, self.log)

    def load_mcu_record(self, mcu_name: str) -> McuRecord:
        root = self._parse_file(f"{mcu_name}.xml")
        return parse_mcu(root, mcu_name, self.log)

    def load_gpio_descriptor(self, version: str) -> GpioDescriptor:
        """Loads IP/GPIO-<version>_Modes.xml; each version is read at most once per loader."""
        if version not in self._gpio_cache:
            root = self._parse_file(f"IP/GPIO-{version}_Modes.xml")
            self._gpio_cache[version] = parse_gpio_modes(root, version, self.log)
        return self._gpio_cache[version]


def parse_config_file(file_path: str) -> Dict[str, Any]:
    """
    Parses a file path and returns a dictionary.
    Supports .json, .yaml, and .yml extensions.
    """
    _, ext = os.path.splitext(file_path.lower())

    try:
        with open(file_path, 'r', encoding='utf-8') as file:
            if ext == '.json':
                data = json.load(file)
            elif ext in ['.yaml', '.yml']:
                data = yaml.safe_load(file)
            else:
                # Attempt to guess format if extension is non-standard
                content = file.read()
                try:
                    data = json.loads(content)
                except json.JSONDecodeError:
                    data = yaml.safe_load(content)
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read config file {file_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"File content is {type(data).__name__}, expected dict.")
    return data


def load_family_policies(file_path: Optional[str], log: Logger) -> Dict[str, FamilyPolicy]:
    """Default family policies, overridden by the optional config file."""
    if not file_path:
        return parse_policies({})

    policies = parse_policies(parse_config_file(file_path))
    log.info("Family policies loaded", extra={"path": file_path, "count": len(policies)})
    return policies
