import os
import tomllib
from dataclasses import dataclass

from src.infrastructure.backends import AVAILABLE_BACKENDS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _is_int(value) -> bool:
    # TOML booleans load as bool, a subclass of int
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class DiagnosticConfiguration:
    """Configuration for the GPU diagnostic."""

    backend: str = "torch"
    shape: tuple[int, ...] = (2, 3)
    device_index: int = 0
    report_environment: bool = False
    check_compute: bool = False
    compute_size: int = 1000
    log_level: str = "INFO"

    def __post_init__(self):
        """Normalize the backend name, shape and log level, and validate field values.

        Raises
        ------
        ValueError
            If the backend is unknown, the shape is empty or has a non-positive
            dimension, the device index is not a non-negative integer, the
            compute size is not a positive integer, a flag is not a boolean,
            or the log level is unknown.
        """
        if not isinstance(self.backend, str) or self.backend.lower() not in AVAILABLE_BACKENDS:
            raise ValueError(f"Unknown backend {self.backend!r}. Available: {list(AVAILABLE_BACKENDS)}")
        self.backend = self.backend.lower()

        if not isinstance(self.shape, (list, tuple)):
            raise ValueError(f"Tensor shape must be a list of integers. Got: {self.shape!r}")
        self.shape = tuple(self.shape)
        if not self.shape:
            raise ValueError("Tensor shape must have at least one dimension")
        if any(not _is_int(size) or size <= 0 for size in self.shape):
            raise ValueError(f"Tensor dimensions must be positive integers. Got: {list(self.shape)}")
        if not _is_int(self.device_index) or self.device_index < 0:
            raise ValueError(f"Device index must be a non-negative integer. Got: {self.device_index!r}")

        if not _is_int(self.compute_size) or self.compute_size <= 0:
            raise ValueError(f"Compute size must be a positive integer. Got: {self.compute_size!r}")

        for flag in ("report_environment", "check_compute"):
            if not isinstance(getattr(self, flag), bool):
                raise ValueError(f"{flag} must be true or false. Got: {getattr(self, flag)!r}")

        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.log_level!r}. Available: {list(LOG_LEVELS)}")
        self.log_level = self.log_level.upper()

    @classmethod
    def load(cls, config_path: str) -> "DiagnosticConfiguration":
        """
        Load diagnostic configuration from a TOML file.

        Parameters
        ----------
        config_path : str
            Filesystem path to a TOML file containing a "diagnostic" table.

        Returns
        -------
        DiagnosticConfiguration
            Instance populated from the "diagnostic" table; fields not present
            use their dataclass defaults.

        Raises
        ------
        FileNotFoundError
            If no file exists at `config_path`.
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found at {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        diagnostic_data = data.get("diagnostic", {})
        return cls(**diagnostic_data)
