import json
import logging
from pathlib import Path

import numba
import yaml


class Config:
    """Runtime settings read from a json or yaml file.

    All sections are optional::

        backend:
          gpu: false
          threads: 4
        logging:
          level: INFO
        benchmark:
          points: 2000
          centers: 500
    """

    config: dict = {}

    gpu: bool = False
    threads: int | None = None
    log_level: str = "WARNING"
    benchmark: dict = {}

    BENCHMARK_DEFAULTS = dict(
        points=2000,
        centers=500,
        dimensions=2,
        values=1,
        radius=0.05,
        mask_size=1_000_000,
        seed=0,
    )

    def __init__(self, path_config: str | None = None):
        self.log = logging.getLogger(self.__class__.__module__)
        self.benchmark = dict(self.BENCHMARK_DEFAULTS)
        if path_config is None:
            self.config = {}
            return

        if not isinstance(path_config, (str, Path)):
            raise ValueError("The config file path needs to be a string!")
        _path_config = Path(path_config)
        self.file_type = _path_config.suffix
        match self.file_type:
            case ".json":
                with open(_path_config) as data:
                    self.config = json.load(data)
            case ".yaml" | ".yml":
                with open(_path_config) as data:
                    self.config = yaml.safe_load(data)
            case _:
                raise ValueError(
                    "The provided config file needs to be a json or yaml file!"
                )
        if self.config is None:
            raise ValueError(
                f"Could not read config file {path_config}. The document is empty."
            )
        if not isinstance(self.config, dict):
            raise ValueError(
                f"The config file {path_config} needs to contain a mapping at the top level."
            )
        self.__read()

    def __read(self):
        for key in self.config:
            if key not in ("backend", "logging", "benchmark"):
                self.log.warning(f"Unknown config section '{key}' will be ignored.")

        backend = self.__section("backend")
        self.gpu = bool(backend.get("gpu", False))
        if backend.get("threads") is not None:
            self.threads = int(backend["threads"])

        logging_section = self.__section("logging")
        self.log_level = str(logging_section.get("level", self.log_level)).upper()

        benchmark = self.__section("benchmark")
        for key, value in benchmark.items():
            if key not in self.BENCHMARK_DEFAULTS:
                self.log.warning(f"Unknown benchmark setting '{key}' will be ignored.")
                continue
            self.benchmark[key] = type(self.BENCHMARK_DEFAULTS[key])(value)

    def __section(self, name: str) -> dict:
        section = self.config.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ValueError(
                f"The config section '{name}' needs to be a mapping, "
                f"got {type(section).__name__}."
            )
        return section

    def apply(self) -> None:
        """Apply the thread setting to the Numba thread pool."""

        if self.threads is None:
            return
        threads = min(max(1, self.threads), numba.config.NUMBA_NUM_THREADS)
        if threads != self.threads:
            self.log.warning(
                f"Requested {self.threads} threads, using {threads} "
                f"(available: {numba.config.NUMBA_NUM_THREADS})."
            )
        numba.set_num_threads(threads)
        self.log.info(f"Numba thread pool set to {threads} threads.")
