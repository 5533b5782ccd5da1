import logging
from logging import Logger
from .logger import setup_logger, StageFilter
from .codegen.builder import CodeGenerationBuilder, GENERATE_TARGETS


class Assistant:

    def __init__(self, name: str, stream=None):
        self.log: Logger = setup_logger(name, stream=stream)

    def set_log_level(self, level: str):
        """Sets the logging level based on a string input."""
        log: Logger = self.log
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f'Invalid log level: {level}')
        log.setLevel(numeric_level)
        log.debug(f"Log level set to {level.upper()}")

    def run(self, **kwargs) -> bool:
        log: Logger = self.log
        log.debug("running assistant", extra={"arguments": kwargs})

        action = kwargs.get("generate")
        if action in GENERATE_TARGETS:
            stage = StageFilter(action)
            log.addFilter(stage)
            try:
                builder = CodeGenerationBuilder(logger=self.log, **kwargs)
                return builder.build()
            finally:
                log.removeFilter(stage)

        raise ValueError(f"No valid generation target specified in run command. Got: {action}")
