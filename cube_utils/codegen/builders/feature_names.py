import re
from ...errors import FeatureNameError

# Note: GPIO versions other than v1_0 are not supported
GPIO_VERSION = re.compile(r"^([^_]*)_gpio_v1_0$")


def gpio_version_to_feature(version: str) -> str:
    """
    Convert a GPIO IP version (e.g. "STM32L152x8_gpio_v1_0") to a feature name
    (e.g. "io-STM32L152x8").
    """
    match = GPIO_VERSION.match(version)
    if not match:
        raise FeatureNameError(f"Could not parse version {version!r}")
    return f"io-{match.group(1)}"


def eeprom_size_to_feature(size: int) -> str:
    return f"eeprom-{size}"
