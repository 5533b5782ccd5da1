from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class PeripheralRole(Enum):
    """Peripheral roles a pin signal can be classified into."""
    RX = "rx"
    TX = "tx"
    MOSI = "mosi"
    MISO = "miso"
    SCK = "sck"
    SCL = "scl"
    SDA = "sda"

    @property
    def trait_name(self) -> str:
        """HAL trait implemented by pins with this role, e.g. RxPin."""
        return TRAIT_NAMES[self]


TRAIT_NAMES = {
    PeripheralRole.RX: "RxPin",
    PeripheralRole.TX: "TxPin",
    PeripheralRole.MOSI: "MosiPin",
    PeripheralRole.MISO: "MisoPin",
    PeripheralRole.SCK: "SckPin",
    PeripheralRole.SCL: "SclPin",
    PeripheralRole.SDA: "SdaPin",
}


@dataclass(frozen=True)
class Capability:
    af: str    # e.g., "AF5"
    role: PeripheralRole
    peripheral: str    # e.g., "USART2"

    @property
    def af_number(self) -> Optional[int]:
        digits = self.af[2:] if self.af.upper().startswith("AF") else self.af
        return int(digits) if digits.isdigit() else None

    def render(self) -> str:
        return f"{self.af}: {self.role.trait_name}<{self.peripheral}>"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class FamilyMcu:
    name: str    # e.g., "STM32L011D(3-4)Px"
    ref_name: str    # e.g., "STM32L011D3Px"
    package_name: str    # e.g., "TSSOP14"


@dataclass(frozen=True)
class SubFamily:
    name: str
    mcus: Tuple[FamilyMcu, ...] = ()

    def __iter__(self):
        return iter(self.mcus)


@dataclass(frozen=True)
class Family:
    name: str
    sub_families: Tuple[SubFamily, ...] = ()

    def __iter__(self):
        return iter(self.sub_families)

    def mcus(self):
        for sub_family in self.sub_families:
            yield from sub_family


@dataclass(frozen=True)
class FamilyHierarchy:
    families: Tuple[Family, ...] = ()

    def __iter__(self):
        return iter(self.families)

    def find(self, name: str) -> Optional[Family]:
        return next((f for f in self.families if f.name == name), None)


@dataclass(frozen=True)
class PeripheralInstance:
    instance_name: str    # e.g., "USART2"
    name: str    # e.g., "USART"
    version: str    # e.g., "sci2_v1_1_Cube"


@dataclass(frozen=True)
class McuRecord:
    name: str
    peripheral_instances: Tuple[PeripheralInstance, ...] = ()
    eeprom_size: Optional[int] = None    # bytes, None when unknown

    def get_ip(self, name: str) -> Optional[PeripheralInstance]:
        return next((ip for ip in self.peripheral_instances if ip.name == name), None)

    @property
    def gpio_version(self) -> Optional[str]:
        ip = self.get_ip("GPIO")
        return ip.version if ip else None


@dataclass(frozen=True)
class PinSignal:
    name: str    # e.g., "USART2_TX"
    af_selector: str = ""    # e.g., "GPIO_AF4_USART2"


@dataclass(frozen=True)
class GpioPin:
    port_name: str    # e.g., "PA"
    name: str    # e.g., "PA2"
    parameters: Tuple[Tuple[str, str], ...] = ()    # (name, possible value)
    signals: Tuple[PinSignal, ...] = ()

    def get_parameter(self, name: str) -> Optional[str]:
        return next((value for key, value in self.parameters if key == name), None)

    @property
    def pin_id(self) -> Optional[str]:
        """Port name plus the index from the GPIO_Pin parameter, e.g. GPIO_PIN_9 on PA gives PA9."""
        value = self.get_parameter("GPIO_Pin")
        if value is None:
            return None
        parts = value.split("_")
        if len(parts) < 3 or not parts[2]:
            return None
        return f"{self.port_name}{parts[2]}"


@dataclass(frozen=True)
class GpioDescriptor:
    version: str    # e.g., "STM32L051_gpio_v1_0"
    pins: Tuple[GpioPin, ...] = field(default_factory=tuple)

    def __repr__(self) -> str:
        return f"GpioDescriptor({self.version}, {len(self.pins)} pins)"
