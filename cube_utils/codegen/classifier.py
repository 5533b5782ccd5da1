import re
from typing import FrozenSet, Optional, Tuple
from .models import Capability, PeripheralRole

# Checked in order; every match contributes a capability, so roles are not exclusive.
ROLE_PATTERNS: Tuple[Tuple[re.Pattern, PeripheralRole], ...] = (
    (re.compile(r"(LP)?US?ART\d_RX"), PeripheralRole.RX),
    (re.compile(r"(LP)?US?ART\d_TX"), PeripheralRole.TX),
    (re.compile(r"SPI\d_MOSI"), PeripheralRole.MOSI),
    (re.compile(r"SPI\d_MISO"), PeripheralRole.MISO),
    (re.compile(r"SPI\d_SCK"), PeripheralRole.SCK),
    (re.compile(r"I2C\d_SCL"), PeripheralRole.SCL),
    (re.compile(r"I2C\d_SDA"), PeripheralRole.SDA),
)


def get_af_value(selector: str) -> Optional[str]:
    """Returns the AF token of a selector such as 'GPIO_AF5_USART2' ('AF5'), or None."""
    parts = (selector or "").split("_")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


def get_peripheral(signal_name: str) -> str:
    return signal_name.split("_")[0]


def classify(signal_name: str, selector: str) -> FrozenSet[Capability]:
    """
    Classifies one pin signal into the peripheral-role capabilities it provides.

    A selector without an AF token yields no capabilities rather than an error.
    """
    af = get_af_value(selector)
    if af is None:
        return frozenset()

    peripheral = get_peripheral(signal_name)
    return frozenset(
        Capability(af=af, role=role, peripheral=peripheral)
        for pattern, role in ROLE_PATTERNS
        if pattern.search(signal_name)
    )
