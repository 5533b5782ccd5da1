from logging import Logger
import xml.etree.ElementTree as ET
from typing import List, Optional, Tuple
from ..models import GpioDescriptor, GpioPin, PinSignal


def _possible_value(param: ET.Element) -> str:
    value = param.find("PossibleValue")
    return (value.text or "").strip() if value is not None else ""


def _parse_parameters(node: ET.Element) -> List[Tuple[str, str]]:
    return [(p.get("Name", ""), _possible_value(p)) for p in node.findall("SpecificParameter")]


def _af_selector(signal_node: ET.Element) -> str:
    """Prefers the GPIO_AF parameter; older files carry only one unnamed parameter."""
    params = signal_node.findall("SpecificParameter")
    selected: Optional[ET.Element] = next((p for p in params if p.get("Name") == "GPIO_AF"), None)
    if selected is None and params:
        selected = params[0]
    return _possible_value(selected) if selected is not None else ""


def parse_gpio_modes(root: ET.Element, version: str, log: Logger) -> GpioDescriptor:
    """
    Parses an IP/GPIO-<version>_Modes.xml document into pins with their signals:
    GPIO_Pin(PortName, Name) -> SpecificParameter(GPIO_Pin), PinSignal(Name) -> SpecificParameter(GPIO_AF)
    """
    log.debug("Parsing GPIO modes", extra={"version": version})

    pins = []
    for pin_node in root.findall("GPIO_Pin"):
        signals = tuple(
            PinSignal(name=s.get("Name", ""), af_selector=_af_selector(s))
            for s in pin_node.findall("PinSignal")
        )
        pins.append(GpioPin(
            port_name=pin_node.get("PortName", ""),
            name=pin_node.get("Name", ""),
            parameters=tuple(_parse_parameters(pin_node)),
            signals=signals,
        ))

    log.debug("Parsed GPIO modes", extra={"version": version, "count": len(pins)})
    return GpioDescriptor(version=version, pins=tuple(pins))
