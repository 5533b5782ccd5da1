from logging import Logger
from typing import Dict, List, Optional, Set, Tuple
from .classifier import classify
from .models import Capability, GpioDescriptor, GpioPin
from .utils import alphanumeric_key

PinTable = List[Tuple[str, List[Capability]]]


def collect_pin_capabilities(pin: GpioPin, log: Optional[Logger] = None) -> Set[Capability]:
    capabilities: Set[Capability] = set()
    for signal in pin.signals:
        found = classify(signal.name, signal.af_selector)
        if not found and log is not None:
            log.debug("No capability for signal", extra={"pin": pin.name, "signal": signal.name, "selector": signal.af_selector})
        capabilities.update(found)
    return capabilities


def sort_capabilities(capabilities) -> List[Capability]:
    return sorted(set(capabilities), key=lambda c: alphanumeric_key(c.render()))


def aggregate_pins(descriptor: GpioDescriptor, log: Optional[Logger] = None) -> PinTable:
    """
    Groups the capabilities of a GPIO descriptor's pins by pin identifier.

    Entries without a derivable identifier are skipped. When two entries derive
    the same identifier, the later entry replaces the earlier one; the two are
    never merged. Pins left without capabilities are dropped.
    """
    pin_map: Dict[str, Set[Capability]] = {}

    for pin in descriptor.pins:
        pin_id = pin.pin_id
        if pin_id is None:
            continue
        if pin_id in pin_map and log is not None:
            log.debug("Duplicate pin identifier, keeping the later entry", extra={"pin": pin_id, "version": descriptor.version})
        pin_map[pin_id] = collect_pin_capabilities(pin, log)

    table = [(pin_id, sort_capabilities(caps)) for pin_id, caps in pin_map.items() if caps]
    table.sort(key=lambda entry: alphanumeric_key(entry[0]))

    if log is not None:
        log.debug("Aggregated pin capabilities", extra={"version": descriptor.version, "pins": len(table)})
    return table
