from dataclasses import dataclass, field
from logging import Logger
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple
from ..errors import FamilyNotFoundError, RecordParseError
from .family_config import FamilyPolicy
from .models import McuRecord


@dataclass(frozen=True)
class GroupedFamily:
    """
    Per-family lookup maps consumed by the emitters.

    gpio_map: GPIO descriptor version -> MCU ref names, in order of first encounter.
    package_map: MCU ref name -> package name, only for package-feature families.
    eeprom_map: EEPROM size in bytes -> MCU ref names; unknown sizes are omitted.
    mcu_records: MCU ref name -> loaded MCU record.
    """
    family: str
    gpio_map: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    package_map: Mapping[str, str] = field(default_factory=dict)
    eeprom_map: Mapping[int, Tuple[str, ...]] = field(default_factory=dict)
    mcu_records: Mapping[str, McuRecord] = field(default_factory=dict)

    def ref_names(self) -> List[str]:
        return [ref for refs in self.gpio_map.values() for ref in refs]


def _freeze(groups: Dict) -> Mapping:
    return MappingProxyType({key: tuple(values) for key, values in groups.items()})


def group_family(loader, family_name: str, policy: FamilyPolicy, log: Logger) -> GroupedFamily:
    """
    Iterates the sub-families and MCUs of one family, loading every MCU record
    once and grouping ref names by GPIO version and EEPROM size.
    """
    families = loader.load_family_hierarchy()
    family = families.find(family_name)
    if family is None:
        raise FamilyNotFoundError(family_name)

    gpio_map: Dict[str, List[str]] = {}
    package_map: Dict[str, str] = {}
    eeprom_map: Dict[int, List[str]] = {}
    mcu_records: Dict[str, McuRecord] = {}

    for sub_family in family:
        log.debug("Grouping sub-family", extra={"family": family_name, "sub_family": sub_family.name, "count": len(sub_family.mcus)})
        for mcu in sub_family:
            record = loader.load_mcu_record(mcu.name)

            gpio_version = record.gpio_version
            if gpio_version is None:
                raise RecordParseError(f"MCU {mcu.name} declares no GPIO peripheral")
            gpio_map.setdefault(gpio_version, []).append(mcu.ref_name)

            if policy.package_features:
                package_map[mcu.ref_name] = mcu.package_name

            if record.eeprom_size is not None:
                eeprom_map.setdefault(record.eeprom_size, []).append(mcu.ref_name)

            mcu_records[mcu.ref_name] = record

    log.info("Grouped family",
             extra={
                 "family": family_name,
                 "mcus": len(mcu_records),
                 "gpio_versions": len(gpio_map),
                 "eeprom_sizes": len(eeprom_map),
             })

    return GroupedFamily(
        family=family_name,
        gpio_map=_freeze(gpio_map),
        package_map=MappingProxyType(package_map),
        eeprom_map=_freeze(eeprom_map),
        mcu_records=MappingProxyType(mcu_records),
    )
