"""
Check Compute Use-Case.

Allocating a tensor on the GPU only proves that memory can be reserved and
written. This use-case also runs a kernel: it multiplies a random matrix by
its transpose on the GPU, copies the product back to the CPU and prints its
shape and summary statistics.
"""
import logging
from typing import Callable

from src.domain.entities.report import ComputeReport
from src.domain.interfaces.tensor_backend import TensorBackend

logger = logging.getLogger(__name__)


class CheckCompute:
    """
    Use-case for checking that the accelerator can execute computations.

    Attributes
    ----------
    backend : TensorBackend
        The numeric library under test.
    size : int
        The multiplied matrix is `size` x `size`.
    device_index : int
        Index of the GPU the product is computed on.
    write : Callable[[str], None]
        Sink receiving each output line.
    """

    def __init__(
        self,
        backend: TensorBackend,
        size: int = 1000,
        device_index: int = 0,
        write: Callable[[str], None] = print,
    ) -> None:
        self.backend = backend
        self.size = size
        self.device_index = device_index
        self.write = write

    def run(self) -> ComputeReport | None:
        """
        Execute the compute check.

        Returns
        -------
        ComputeReport | None
            The printed results, or None when no GPU is available and the
            check was skipped.
        """
        if not self.backend.is_available():
            self.write(f"{self.backend.accelerator} compute check skipped: no device available")
            return None

        shape = (self.size, self.size)
        logger.info(f"Multiplying a {self.size}x{self.size} matrix on {self.backend.accelerator}...")
        try:
            matrix = self.backend.to_accelerator(
                self.backend.random_tensor(shape),
                device_index=self.device_index,
            )
            product = self.backend.to_host(self.backend.matmul_transposed(matrix))
            statistics = self.backend.statistics(product)
        except Exception as error:
            logger.error(f"{self.backend.accelerator} compute check failed: {error}")
            raise error

        report = ComputeReport(
            accelerator=self.backend.accelerator,
            device_index=self.device_index,
            input_shape=shape,
            result_shape=tuple(product.shape),
            statistics=statistics,
        )
        for line in report.lines():
            self.write(line)
        return report
