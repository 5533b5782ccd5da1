import sys
from logging import Logger
from typing import Dict, Optional, TextIO
from ..errors import CubeUtilsError, FamilyNotFoundError, FeatureNameError, LoadError
from .builders import generate_eeprom_sizes, generate_features, generate_pin_mappings
from .family_config import FamilyPolicy, get_policy
from .grouping import GroupedFamily, group_family
from .loader import CubeDatabaseLoader, load_family_policies

GENERATE_TARGETS = ("features", "pin_mappings", "eeprom_sizes")


class CodeGenerationBuilder:

    def __init__(self, logger: Logger, **kwargs):
        """
        Initializes the builder with the database location, the generation target
        and the MCU family to extract.
        """
        self.log = logger

        self.db_dir: str = kwargs.get("db_dir")
        self.generate: str = kwargs.get("generate")
        self.mcu_family: str = kwargs.get("mcu_family")
        self.config_file: Optional[str] = kwargs.get("config_file_path")
        self.output_path: Optional[str] = kwargs.get("output_path")

        if self.generate not in GENERATE_TARGETS:
            raise ValueError(f"Unsupported generation target: {self.generate}")
        if not self.db_dir or not self.mcu_family:
            raise ValueError("Both a database directory and an MCU family are required")

        self.loader = kwargs.get("loader") or CubeDatabaseLoader(logger=logger, db_dir=self.db_dir)
        self.policies: Dict[str, FamilyPolicy] = kwargs.get("policies")

        self.log.debug("CodeGenerationBuilder initialized",
                       extra={
                           "db_dir": self.db_dir,
                           "generate": self.generate,
                           "mcu_family": self.mcu_family,
                           "config_file": self.config_file,
                           "output_path": self.output_path,
                       })

    def render(self) -> str:
        """Runs the pipeline and returns the generated text; errors propagate."""
        if self.policies is None:
            self.policies = load_family_policies(self.config_file, self.log)
        policy = get_policy(self.mcu_family, self.policies)

        grouped: GroupedFamily = group_family(self.loader, self.mcu_family, policy, self.log)

        if self.generate == "features":
            return generate_features(grouped, policy, self.log)
        if self.generate == "pin_mappings":
            return generate_pin_mappings(grouped, self.loader.load_gpio_descriptor, self.log)
        return generate_eeprom_sizes(grouped)

    def build(self, stream: Optional[TextIO] = None) -> bool:
        """Executes the generation process, writing to the output path or the given stream."""
        log: Logger = self.log
        log.info(f"Starting {self.generate} generation for {self.mcu_family}")

        try:
            content = self.render()
        except FamilyNotFoundError as e:
            log.error(str(e), extra={"stage": "lookup", "family": e.family})
            return False
        except LoadError as e:
            log.error(f"Could not load database record: {e}", extra={"stage": "load", "family": self.mcu_family, "path": e.path})
            return False
        except FeatureNameError as e:
            log.error(f"Could not derive feature name: {e}", extra={"stage": "render", "family": self.mcu_family})
            return False
        except CubeUtilsError as e:
            log.error(f"Generation failed: {e}", extra={"stage": "config", "family": self.mcu_family})
            return False

        if self.output_path:
            try:
                with open(self.output_path, "w") as f:
                    f.write(content)
            except OSError as e:
                log.error(f"Could not write output: {e}", extra={"stage": "write", "family": self.mcu_family, "path": self.output_path})
                return False
            log.info("Wrote %s to %s", self.generate, self.output_path)
        else:
            (stream or sys.stdout).write(content)

        log.info(f"{self.generate} generation successful")
        return True
