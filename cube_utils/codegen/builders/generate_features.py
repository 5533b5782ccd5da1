from logging import Logger
from typing import List
from ..family_config import FamilyPolicy
from ..grouping import GroupedFamily
from ..utils import alphanumeric_key, alphanumeric_sorted, dedup
from .feature_names import eeprom_size_to_feature, gpio_version_to_feature


def mcu_dependencies(ref_name: str, gpio_feature: str, grouped: GroupedFamily, policy: FamilyPolicy) -> List[str]:
    """Static family feature, package, GPIO version and EEPROM size, in that order."""
    dependencies = []

    static = policy.static_dependency(ref_name)
    if static:
        dependencies.append(static)

    package = grouped.package_map.get(ref_name)
    if package:
        dependencies.append(package.lower())

    dependencies.append(gpio_feature)

    record = grouped.mcu_records.get(ref_name)
    if record is not None and record.eeprom_size is not None:
        dependencies.append(eeprom_size_to_feature(record.eeprom_size))

    return dependencies


def generate_features(grouped: GroupedFamily, policy: FamilyPolicy, log: Logger) -> str:
    """
    Generate all Cargo features

    Feature categories:

    - IO features (`io-*`)
    - EEPROM features (`eeprom-*`)
    - Package features (only for families with package based features)

    Finally, the MCU features are printed, they act purely as aliases for the
    other features.
    """
    lines: List[str] = []

    # GPIO version -> io feature
    io_features = {version: gpio_version_to_feature(version) for version in grouped.gpio_map}

    lines.append("# Features based on the GPIO peripheral version")
    lines.append("# This determines the pin function mapping of the MCU")
    for feature in alphanumeric_sorted(set(io_features.values())):
        lines.append(f"{feature} = []")
    lines.append("")

    lines.append("# Features based on EEPROM size (in bytes)")
    for size in sorted(grouped.eeprom_map):
        lines.append(f"{eeprom_size_to_feature(size)} = []")
    lines.append("")

    if grouped.package_map:
        lines.append("# Physical packages")
        packages = dedup(alphanumeric_sorted(p.lower() for p in grouped.package_map.values() if p))
        for package in packages:
            lines.append(f"{package} = []")
        lines.append("")

    aliases = []
    for version, ref_names in grouped.gpio_map.items():
        for ref_name in ref_names:
            dependencies = mcu_dependencies(ref_name, io_features[version], grouped, policy)
            quoted = ", ".join(f"\"{d}\"" for d in dependencies)
            aliases.append((ref_name, f"mcu-{ref_name} = [{quoted}]"))
    aliases.sort(key=lambda alias: alphanumeric_key(alias[0]))

    lines.append("# MCU aliases")
    lines.append("#")
    lines.append("# Note: These are just aliases, they should not be used to directly feature gate")
    lines.append("# functionality in the HAL! However, user code should usually depend on a MCU alias.")
    lines.extend(alias for _, alias in aliases)

    log.debug("Rendered features",
              extra={
                  "family": grouped.family,
                  "io_features": len(io_features),
                  "eeprom_sizes": len(grouped.eeprom_map),
                  "aliases": len(aliases),
              })
    return "\n".join(lines) + "\n"
