from logging import Logger
import xml.etree.ElementTree as ET
from typing import Optional
from ..models import McuRecord, PeripheralInstance


def parse_eeprom_size(text: Optional[str]) -> Optional[int]:
    """EEPROM size in bytes; absent or non-numeric values mean no known size."""
    if text is None:
        return None
    text = text.strip()
    return int(text) if text.isdecimal() else None


def parse_mcu(root: ET.Element, name: str, log: Logger) -> McuRecord:
    """Parses the peripheral instance list and the E2prom field of a per-MCU file."""
    log.debug("Parsing MCU record", extra={"mcu": name})

    instances = []
    for node in root.findall("IP"):
        instances.append(PeripheralInstance(
            instance_name=node.get("InstanceName", ""),
            name=node.get("Name", ""),
            version=node.get("Version", ""),
        ))

    eeprom_node = root.find("E2prom")
    eeprom_size = parse_eeprom_size(eeprom_node.text if eeprom_node is not None else None)
    if eeprom_node is not None and eeprom_size is None:
        log.debug("Ignoring unparseable EEPROM size", extra={"mcu": name, "value": eeprom_node.text})

    return McuRecord(name=name, peripheral_instances=tuple(instances), eeprom_size=eeprom_size)
