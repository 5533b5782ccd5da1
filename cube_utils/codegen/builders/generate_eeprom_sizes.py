from ..grouping import GroupedFamily
from .feature_names import eeprom_size_to_feature


def generate_eeprom_sizes(grouped: GroupedFamily) -> str:
    """Generate code containing the EEPROM size, one feature-gated constant per size."""
    lines = ["// EEPROM sizes in bytes, generated with cube-utils"]
    for size in sorted(grouped.eeprom_map):
        lines.append(f"#[cfg(feature = \"{eeprom_size_to_feature(size)}\")]")
        lines.append(f"const EEPROM_SIZE_BYTES: u32 = {size};")
    return "\n".join(lines) + "\n"
