from .families_parser import parse_families
from .mcu_parser import parse_mcu, parse_eeprom_size
from .gpio_modes_parser import parse_gpio_modes

__all__ = ["parse_families", "parse_mcu", "parse_eeprom_size", "parse_gpio_modes"]
