from logging import Logger
from typing import Callable, List
from ..aggregator import PinTable, aggregate_pins
from ..grouping import GroupedFamily
from ..models import GpioDescriptor
from ..utils import alphanumeric_sorted
from .feature_names import gpio_version_to_feature


def render_pin_table(table: PinTable) -> List[str]:
    """Renders one `pins!` invocation; multi-capability pins get a nested block."""
    lines = ["pins! {"]
    for pin_id, capabilities in table:
        if not capabilities:
            continue
        if len(capabilities) == 1:
            lines.append(f"    {pin_id} => {{{capabilities[0].render()}}},")
        else:
            lines.append(f"    {pin_id} => {{")
            for capability in capabilities:
                lines.append(f"        {capability.render()},")
            lines.append("    },")
    lines.append("}")
    return lines


def generate_pin_mappings(grouped: GroupedFamily,
                          load_descriptor: Callable[[str], GpioDescriptor],
                          log: Logger) -> str:
    """
    Generates the pin mappings of a family: one feature-gated `pins!` block per
    GPIO version, versions in alphanumeric order. Each descriptor is loaded once.
    """
    lines: List[str] = []

    for version in alphanumeric_sorted(grouped.gpio_map.keys()):
        feature = gpio_version_to_feature(version)
        lines.append(f"#[cfg(feature = \"{feature}\")]")

        descriptor = load_descriptor(version)
        table = aggregate_pins(descriptor, log)
        lines.extend(render_pin_table(table))
        lines.extend(["", ""])

        log.debug("Rendered pin mappings", extra={"version": version, "feature": feature, "pins": len(table)})

    return "\n".join(lines) + "\n" if lines else ""
