"""
Run Diagnostic Use-Case.

This module provides the use-case that checks a numeric library's GPU
support: it prints the library version, whether a GPU is available, how
many devices are visible and, when a GPU is present, a small random tensor
allocated on it.
"""
import logging
from dataclasses import replace
from typing import Callable

from src.domain.entities.report import DiagnosticReport
from src.domain.interfaces.tensor_backend import TensorBackend

logger = logging.getLogger(__name__)


class RunDiagnostic:
    """
    Use-case for running the GPU diagnostic against a tensor backend.

    The workflow is strictly linear:
    1. Print the library version
    2. Print whether a GPU is available
    3. Print the number of GPU devices
    4. If a GPU is available, allocate a random tensor, move it to the GPU,
       print a confirmation line and the tensor

    Errors raised by the backend are not handled here; they propagate to
    the caller unchanged.

    Attributes
    ----------
    backend : TensorBackend
        The numeric library under test.
    shape : tuple[int, ...]
        Shape of the tensor allocated on the GPU.
    device_index : int
        Index of the GPU the tensor is moved to.
    write : Callable[[str], None]
        Sink receiving each output line.
    """

    def __init__(
        self,
        backend: TensorBackend,
        shape: tuple[int, ...] = (2, 3),
        device_index: int = 0,
        write: Callable[[str], None] = print,
    ) -> None:
        """
        Initialize the RunDiagnostic use-case.

        Parameters
        ----------
        backend : TensorBackend
            The numeric library under test.
        shape : tuple[int, ...], optional
            Shape of the tensor allocated on the GPU. Default is (2, 3).
        device_index : int, optional
            Index of the GPU the tensor is moved to. Default is 0.
        write : Callable[[str], None], optional
            Sink receiving each output line. Default is `print`.
        """
        self.backend = backend
        self.shape = tuple(shape)
        self.device_index = device_index
        self.write = write

    def run(self) -> DiagnosticReport:
        """
        Execute the diagnostic.

        Each line is written as soon as the corresponding query returns, so a
        crash inside the library still leaves the earlier lines on screen.

        Returns
        -------
        DiagnosticReport
            The values that were printed, including the GPU tensor if one
            was allocated.
        """
        logger.debug(f"Running diagnostic with the {self.backend.name} backend")
        report = DiagnosticReport(
            library=self.backend.name,
            accelerator=self.backend.accelerator,
            version=self.backend.version(),
            available=False,
            device_count=0,
        )
        self.write(report.version_line)

        available = self.backend.is_available()
        report = replace(report, available=available)
        self.write(report.availability_line)

        device_count = self.backend.device_count()
        report = replace(report, device_count=device_count)
        self.write(report.device_count_line)

        if not available:
            logger.info(f"No {self.backend.accelerator} device available, skipping allocation.")
            return report

        logger.info(
            f"Allocating a {'x'.join(map(str, self.shape))} tensor on "
            f"{self.backend.accelerator} device {self.device_index}..."
        )
        try:
            tensor = self.backend.to_accelerator(
                self.backend.random_tensor(self.shape),
                device_index=self.device_index,
            )
            tensor_text = self.backend.format_tensor(tensor)
        except Exception as error:
            logger.error(f"{self.backend.accelerator} tensor allocation failed: {error}")
            raise error

        report = replace(report, tensor=tensor, tensor_text=tensor_text)
        self.write(report.confirmation_line)
        self.write(tensor_text)
        return report
