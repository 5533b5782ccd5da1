"""Shared pytest fixtures: a miniature CubeMX MCU database written to tmp_path."""

import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


FAMILIES_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Families xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
  <Family Name="STM32L0">
    <SubFamily Name="STM32L0x1">
      <Mcu Name="STM32L011D(3-4)Px" PackageName="TSSOP14" RefName="STM32L011D4Px" RPN="STM32L011D4"/>
      <Mcu Name="STM32L051C(6-8)Tx" PackageName="LQFP48" RefName="STM32L051C8Tx" RPN="STM32L051C8"/>
    </SubFamily>
    <SubFamily Name="STM32L0x2">
      <Mcu Name="STM32L052C(6-8)Tx" PackageName="LQFP48" RefName="STM32L052C8Tx" RPN="STM32L052C8"/>
      <Mcu Name="STM32L010F4Px" PackageName="TSSOP20" RefName="STM32L010F4Px" RPN="STM32L010F4"/>
    </SubFamily>
  </Family>
  <Family Name="STM32F3">
    <SubFamily Name="STM32F333">
      <Mcu Name="STM32F333C(6-8)Tx" PackageName="LQFP48" RefName="STM32F333C8Tx" RPN="STM32F333C8"/>
    </SubFamily>
  </Family>
  <Family Name="STM32BAD">
    <SubFamily Name="STM32BADx">
      <Mcu Name="STM32BAD" PackageName="LQFP48" RefName="STM32BADTx" RPN="STM32BAD"/>
    </SubFamily>
  </Family>
</Families>
"""

MCU_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Mcu ClockTree="STM32L0" Family="STM32L0" RefName="{ref}" xmlns="http://mcd.rd.st.com/modules/McuConfig">
  <Core>Arm Cortex-M0+</Core>
  {eeprom}
  <IP InstanceName="RCC" Name="RCC" Version="STM32L0_rcc_v1_0"/>
  <IP InstanceName="GPIO" Name="GPIO" Version="{gpio}"/>
  <IP InstanceName="USART2" Name="USART" Version="sci2_v1_1_Cube"/>
</Mcu>
"""

# (file name, ref name, gpio version, eeprom element)
MCUS = [
    ("STM32L011D(3-4)Px", "STM32L011D4Px", "STM32L011_gpio_v1_0", "<E2prom>512</E2prom>"),
    ("STM32L051C(6-8)Tx", "STM32L051C8Tx", "STM32L051_gpio_v1_0", "<E2prom>2048</E2prom>"),
    ("STM32L052C(6-8)Tx", "STM32L052C8Tx", "STM32L051_gpio_v1_0", "<E2prom>2048</E2prom>"),
    ("STM32L010F4Px", "STM32L010F4Px", "STM32L011_gpio_v1_0", "<E2prom>-</E2prom>"),
    ("STM32F333C(6-8)Tx", "STM32F333C8Tx", "STM32F333_gpio_v1_0", ""),
    ("STM32BAD", "STM32BADTx", "STM32BAD_gpio_v1_1", ""),
]

GPIO_L051_XML = """<?xml version="1.0" encoding="UTF-8"?>
<IP DBVersion="V4.0" IPType="peripheral" IpGroup="GPIO" Name="GPIO" Version="STM32L051_gpio_v1_0" xmlns="http://mcd.rd.st.com/modules/IP">
  <RefParameter Name="GPIO_Speed" DefaultValue="GPIO_SPEED_FREQ_LOW"/>
  <GPIO_Pin PortName="PA" Name="PA10">
    <SpecificParameter Name="GPIO_Pin"><PossibleValue>GPIO_PIN_10</PossibleValue></SpecificParameter>
    <PinSignal Name="USART1_RX">
      <SpecificParameter Name="GPIO_AF"><PossibleValue>GPIO_AF4_USART1</PossibleValue></SpecificParameter>
    </PinSignal>
    <PinSignal Name="I2C1_SDA">
      <SpecificParameter Name="GPIO_AF"><PossibleValue>GPIO_AF1_I2C1</PossibleValue></SpecificParameter>
    </PinSignal>
  </GPIO_Pin>
  <GPIO_Pin PortName="PA" Name="PA2">
    <SpecificParameter Name="GPIO_Pin"><PossibleValue>GPIO_PIN_2</PossibleValue></SpecificParameter>
    <PinSignal Name="USART2_TX">
      <SpecificParameter Name="GPIO_AF"><PossibleValue>GPIO_AF4_USART2</PossibleValue></SpecificParameter>
    </PinSignal>
    <PinSignal Name="TIM21_CH1">
      <SpecificParameter Name="GPIO_AF"><PossibleValue>GPIO_AF0_TIM21</PossibleValue></SpecificParameter>
    </PinSignal>
  </GPIO_Pin>
  <GPIO_Pin PortName="PA" Name="PA0-CK_IN">
    <SpecificParameter Name="GPIO_Pin"><PossibleValue>GPIO_PIN_0</PossibleValue></SpecificParameter>
  </GPIO_Pin>
  <GPIO_Pin PortName="PH" Name="VDD">
  </GPIO_Pin>
</IP>
"""

GPIO_L011_XML = """<?xml version="1.0" encoding="UTF-8"?>
<IP Name="GPIO" Version="STM32L011_gpio_v1_0" xmlns="http://mcd.rd.st.com/modules/IP">
  <GPIO_Pin PortName="PB" Name="PB6">
    <SpecificParameter Name="GPIO_Pin"><PossibleValue>GPIO_PIN_6</PossibleValue></SpecificParameter>
    <PinSignal Name="LPUART1_TX">
      <SpecificParameter Name="GPIO_AF"><PossibleValue>GPIO_AF6_LPUART1</PossibleValue></SpecificParameter>
    </PinSignal>
  </GPIO_Pin>
</IP>
"""

GPIO_F333_XML = """<?xml version="1.0" encoding="UTF-8"?>
<IP Name="GPIO" Version="STM32F333_gpio_v1_0" xmlns="http://mcd.rd.st.com/modules/IP">
  <GPIO_Pin PortName="PA" Name="PA5">
    <SpecificParameter Name="GPIO_Pin"><PossibleValue>GPIO_PIN_5</PossibleValue></SpecificParameter>
    <PinSignal Name="SPI1_SCK">
      <SpecificParameter Name="GPIO_AF"><PossibleValue>GPIO_AF5_SPI1</PossibleValue></SpecificParameter>
    </PinSignal>
  </GPIO_Pin>
</IP>
"""


@pytest.fixture
def db_dir(tmp_path) -> Path:
    """A CubeMX db/mcu directory with two families and three GPIO descriptors."""
    (tmp_path / "IP").mkdir()
    (tmp_path / "families.xml").write_text(FAMILIES_XML, encoding="utf-8")
    for name, ref, gpio, eeprom in MCUS:
        (tmp_path / f"{name}.xml").write_text(MCU_XML.format(ref=ref, gpio=gpio, eeprom=eeprom), encoding="utf-8")
    (tmp_path / "IP" / "GPIO-STM32L051_gpio_v1_0_Modes.xml").write_text(GPIO_L051_XML, encoding="utf-8")
    (tmp_path / "IP" / "GPIO-STM32L011_gpio_v1_0_Modes.xml").write_text(GPIO_L011_XML, encoding="utf-8")
    (tmp_path / "IP" / "GPIO-STM32F333_gpio_v1_0_Modes.xml").write_text(GPIO_F333_XML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def log() -> logging.Logger:
    logger = logging.getLogger("cube-utils-tests")
    logger.setLevel(logging.DEBUG)
    return logger
