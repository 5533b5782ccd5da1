from logging import Logger
import xml.etree.ElementTree as ET
from ...errors import RecordParseError
from ..models import Family, FamilyHierarchy, FamilyMcu, SubFamily


def _parse_mcu(node: ET.Element, family: str) -> FamilyMcu:
    name = node.get("Name")
    ref_name = node.get("RefName")
    if not name or not ref_name:
        raise RecordParseError(f"MCU entry without Name/RefName in family {family}")
    return FamilyMcu(name=name, ref_name=ref_name, package_name=node.get("PackageName", ""))


def parse_families(root: ET.Element, log: Logger) -> FamilyHierarchy:
    """
    Parses families.xml:
    Families -> Family(Name) -> SubFamily(Name) -> Mcu(Name, RefName, PackageName)
    """
    log.debug("Parsing family hierarchy")

    families = []
    for family_node in root.findall("Family"):
        family_name = family_node.get("Name")
        if not family_name:
            raise RecordParseError("Family entry without Name")

        sub_families = []
        for sub_node in family_node.findall("SubFamily"):
            mcus = tuple(_parse_mcu(m, family_name) for m in sub_node.findall("Mcu"))
            sub_families.append(SubFamily(name=sub_node.get("Name", ""), mcus=mcus))

        families.append(Family(name=family_name, sub_families=tuple(sub_families)))

    log.debug("Parsed family hierarchy", extra={"count": len(families)})
    return FamilyHierarchy(families=tuple(families))
