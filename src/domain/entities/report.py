"""Diagnostic report entities."""
from dataclasses import dataclass, field

from src.domain.entities.tensor import Tensor


def format_flag(value: bool) -> str:
    """Render a boolean as the lowercase literal ``true`` or ``false``."""
    return "true" if value else "false"


@dataclass(frozen=True)
class DiagnosticReport:
    """
    Result of a single diagnostic run.

    Attributes
    ----------
    library : str
        Display name of the numeric library (e.g. "Torch").
    accelerator : str
        Display name of the accelerator (e.g. "CUDA").
    version : str
        Version string reported by the library.
    available : bool
        Whether the GPU backend is available.
    device_count : int
        Number of GPU devices detected by the library runtime.
    tensor : Tensor | None
        The tensor allocated on the GPU, or None when no GPU is available.
    tensor_text : str | None
        Printed representation of `tensor`.
    """

    library: str
    accelerator: str
    version: str
    available: bool
    device_count: int
    tensor: Tensor | None = None
    tensor_text: str | None = None

    @property
    def version_line(self) -> str:
        return f"{self.library} Version: {self.version}"

    @property
    def availability_line(self) -> str:
        return f"{self.accelerator} Available: {format_flag(self.available)}"

    @property
    def device_count_line(self) -> str:
        return f"{self.accelerator} Device Count: {self.device_count}"

    @property
    def confirmation_line(self) -> str:
        return f"Created {self.accelerator} tensor successfully!"

    def lines(self) -> list[str]:
        """
        Output lines of the report, in the order they are printed.

        Returns
        -------
        list[str]
            Version, availability and device count, followed by the
            confirmation and the tensor printout when a tensor was allocated.
        """
        lines = [self.version_line, self.availability_line, self.device_count_line]
        if self.tensor_text is not None:
            lines.append(self.confirmation_line)
            lines.append(self.tensor_text)
        return lines


@dataclass(frozen=True)
class EnvironmentReport:
    """Runtime environment and build capabilities seen by a backend."""

    variables: dict[str, str | None] = field(default_factory=dict)
    build_info: dict[str, bool] = field(default_factory=dict)
    device_names: list[str] = field(default_factory=list)

    def lines(self) -> list[str]:
        lines = ["=== Environment ==="]
        for name, value in self.variables.items():
            lines.append(f"{name}: {value if value is not None else '<unset>'}")

        lines.append("=== Build ===")
        for capability, enabled in self.build_info.items():
            lines.append(f"{capability}: {format_flag(enabled)}")

        if self.device_names:
            lines.append("=== Devices ===")
            for index, name in enumerate(self.device_names):
                lines.append(f"Device {index}: {name}")
        return lines


@dataclass(frozen=True)
class ComputeReport:
    """
    Result of running a matrix multiplication on the accelerator.

    Attributes
    ----------
    accelerator : str
        Display name of the accelerator.
    device_index : int
        GPU the product was computed on.
    input_shape : tuple[int, ...]
        Shape of the multiplied matrix.
    result_shape : tuple[int, ...]
        Shape of the product, read after copying it back to the CPU.
    statistics : dict[str, float]
        Mean, max and min of the product.
    """

    accelerator: str
    device_index: int
    input_shape: tuple[int, ...]
    result_shape: tuple[int, ...]
    statistics: dict[str, float] = field(default_factory=dict)

    def lines(self) -> list[str]:
        lines = [
            "=== Compute Check ===",
            f"Matrix Multiplication: {_dims(self.input_shape)} on "
            f"{self.accelerator} device {self.device_index}",
            f"Result Shape: {_dims(self.result_shape)}",
        ]
        for name, value in self.statistics.items():
            lines.append(f"{name}: {value:.4f}")
        lines.append(f"{self.accelerator} compute check passed!")
        return lines


def _dims(shape: tuple[int, ...]) -> str:
    return "x".join(str(size) for size in shape)
