import re
import xml.etree.ElementTree as ET
from typing import Iterable, List, Tuple

_DIGITS = re.compile(r'(\d+)')


def alphanumeric_key(s: str) -> Tuple:
    """
    Sort key comparing digit runs as numbers, so 'PA2' < 'PA10' and 'AF2' < 'AF10'.
    The raw string breaks ties between spellings like 'A01' and 'A1'.
    """
    chunks = tuple(int(c) if c.isdigit() else c for c in _DIGITS.split(s))
    return chunks, s


def alphanumeric_sorted(items: Iterable[str]) -> List[str]:
    return sorted(items, key=alphanumeric_key)


def dedup(items: Iterable) -> List:
    """Drops repeated items, keeping the first occurrence's position."""
    return list(dict.fromkeys(items))


def local_name(tag: str) -> str:
    """Strips an ElementTree '{namespace}' prefix, e.g. '{http://mcd.rd.st.com/modules/IP}GPIO_Pin' -> 'GPIO_Pin'."""
    return tag.rsplit('}', 1)[-1] if isinstance(tag, str) else tag


def strip_namespaces(root: ET.Element) -> ET.Element:
    """CubeMX files declare a default namespace per file kind; drop it so lookups stay plain."""
    for elem in root.iter():
        elem.tag = local_name(elem.tag)
    return root
