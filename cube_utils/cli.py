import argparse
import sys
from typing import List, Optional
from . import __version__
from .assistant import Assistant
from .codegen.builder import GENERATE_TARGETS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cube-utils",
        description="Extract AF modes on MCU pins from the database files provided with STM32CubeMX",
    )
    parser.add_argument("-d", dest="db_dir", required=True,
                        help="Path to the CubeMX MCU database directory")
    parser.add_argument("generate", choices=GENERATE_TARGETS,
                        help="What to generate")
    parser.add_argument("mcu_family",
                        help="The MCU family to extract, e.g. \"STM32L0\"")
    parser.add_argument("-c", "--config", dest="config_file_path",
                        help="YAML or JSON file with family policy overrides")
    parser.add_argument("-o", "--output", dest="output_path",
                        help="Write the generated code to this file instead of stdout")
    parser.add_argument("--log-level", default="warning",
                        help="Logging level (debug, info, warning, error)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    assistant = Assistant("cube-utils")
    try:
        assistant.set_log_level(args.log_level)
    except ValueError as e:
        print(f"cube-utils: {e}", file=sys.stderr)
        return 2

    kwargs = vars(args)
    kwargs.pop("log_level")
    return 0 if assistant.run(**kwargs) else 1


if __name__ == "__main__":
    sys.exit(main())
