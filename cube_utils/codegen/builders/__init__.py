from .feature_names import gpio_version_to_feature, eeprom_size_to_feature
from .generate_pin_mappings import generate_pin_mappings, render_pin_table
from .generate_features import generate_features, mcu_dependencies
from .generate_eeprom_sizes import generate_eeprom_sizes

__all__ = [
    "gpio_version_to_feature",
    "eeprom_size_to_feature",
    "generate_pin_mappings",
    "render_pin_table",
    "generate_features",
    "mcu_dependencies",
    "generate_eeprom_sizes",
]
