import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple
from ..errors import ConfigError


@dataclass(frozen=True)
class FamilyPolicy:
    """
    Per-family generation policy.

    package_features: emit package-based features (the stm32l0xx-hal has them).
    dependencies: ordered (regex, feature) pairs; the first regex matching an
    MCU ref name contributes its feature to that MCU's alias.
    """
    name: str
    package_features: bool = False
    dependencies: Tuple[Tuple[str, str], ...] = ()

    def static_dependency(self, ref_name: str) -> Optional[str]:
        for pattern, feature in self.dependencies:
            if re.search(pattern, ref_name):
                return feature
        return None


DEFAULT_POLICIES: Dict[str, FamilyPolicy] = {
    "STM32L0": FamilyPolicy(
        name="STM32L0",
        package_features=True,
        dependencies=(
            ("^STM32L0.1", "stm32l0x1"),
            ("^STM32L0.2", "stm32l0x2"),
            ("^STM32L0.3", "stm32l0x3"),
        ),
    ),
}


def get_policy(family: str, policies: Optional[Mapping[str, FamilyPolicy]] = None) -> FamilyPolicy:
    policies = DEFAULT_POLICIES if policies is None else policies
    return policies.get(family) or FamilyPolicy(name=family)


def parse_policies(data: Dict[str, Any]) -> Dict[str, FamilyPolicy]:
    """
    Builds policies from a parsed config document:

        families:
          STM32L0:
            package_features: true
            dependencies:
              - ["^STM32L0.1", "stm32l0x1"]

    Entries override the defaults family by family.
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Config content is {type(data).__name__}, expected dict.")

    families = data.get("families", {})
    if not isinstance(families, dict):
        raise ConfigError("The 'families' key must map family names to policies.")

    policies = dict(DEFAULT_POLICIES)
    for name, entry in families.items():
        entry = entry or {}
        if not isinstance(entry, dict):
            raise ConfigError(f"Policy for family {name} must be a mapping.")

        dependencies = []
        for rule in entry.get("dependencies", []) or []:
            if not isinstance(rule, (list, tuple)) or len(rule) != 2:
                raise ConfigError(f"Malformed dependency rule {rule!r} for family {name}, expected [pattern, feature].")
            pattern, feature = str(rule[0]), str(rule[1])
            try:
                re.compile(pattern)
            except re.error as e:
                raise ConfigError(f"Invalid dependency pattern {pattern!r} for family {name}: {e}") from e
            dependencies.append((pattern, feature))

        policies[name] = FamilyPolicy(
            name=name,
            package_features=bool(entry.get("package_features", False)),
            dependencies=tuple(dependencies),
        )
    return policies
