"""
Tensor Backend Interface.

This module defines the abstract interface through which the diagnostic
talks to a numeric library. The library itself is treated as a black box:
the diagnostic only reads its version and device information, allocates
one random tensor and moves it to the GPU.
"""
from abc import ABC, abstractmethod

from src.domain.entities.tensor import Tensor


class TensorBackend(ABC):
    """
    Abstract interface for a GPU-capable numeric library.

    Implementations must not catch errors raised by the underlying library:
    a broken installation is exactly what the diagnostic is meant to expose.

    Attributes
    ----------
    name : str
        Display name of the library (e.g. "Torch").
    accelerator : str
        Display name of the accelerator (e.g. "CUDA").
    """

    name: str = "Tensor"
    accelerator: str = "GPU"

    @abstractmethod
    def version(self) -> str:
        """
        Get the library version.

        Returns
        -------
        str
            Non-empty version string.
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check whether GPU-accelerated execution is possible.

        Returns
        -------
        bool
            True if at least one GPU can be used by the library.
        """
        pass

    @abstractmethod
    def device_count(self) -> int:
        """
        Count the GPU devices detected by the library runtime.

        Returns
        -------
        int
            Number of usable devices, 0 when no GPU is available.
        """
        pass

    @abstractmethod
    def random_tensor(self, shape: tuple[int, ...]) -> Tensor:
        """
        Allocate a tensor filled with uniform random values on the CPU.

        Parameters
        ----------
        shape : tuple[int, ...]
            Size of each dimension.

        Returns
        -------
        Tensor
            New tensor with the library's default floating-point type.
        """
        pass

    @abstractmethod
    def to_accelerator(self, tensor: Tensor, device_index: int = 0) -> Tensor:
        """
        Transfer a tensor to GPU memory.

        Parameters
        ----------
        tensor : Tensor
            Tensor produced by `random_tensor`.
        device_index : int, optional
            Index of the target GPU. Default is 0.

        Returns
        -------
        Tensor
            The tensor placed on the GPU. Callers must use the returned
            object, the original is not modified.
        """
        pass

    @abstractmethod
    def matmul_transposed(self, tensor: Tensor) -> Tensor:
        """
        Multiply a 2-D tensor by its own transpose.

        The product is computed on the device holding `tensor`, so for a GPU
        tensor this runs an actual kernel on the GPU.

        Parameters
        ----------
        tensor : Tensor
            Matrix of shape (n, m).

        Returns
        -------
        Tensor
            Matrix of shape (n, n), on the same device as `tensor`.
        """
        pass

    @abstractmethod
    def to_host(self, tensor: Tensor) -> Tensor:
        """
        Copy a tensor back to CPU memory.

        Parameters
        ----------
        tensor : Tensor
            Tensor on any device.

        Returns
        -------
        Tensor
            The same values, placed on the CPU.
        """
        pass

    @abstractmethod
    def statistics(self, tensor: Tensor) -> dict[str, float]:
        """
        Summarize a tensor's values.

        Returns
        -------
        dict[str, float]
            "Mean", "Max" and "Min" of all elements.
        """
        pass

    def format_tensor(self, tensor: Tensor) -> str:
        """
        Render a tensor for printing.

        Reading a GPU tensor's values synchronizes with the device, so the
        returned text always holds the tensor's actual contents.
        """
        return str(tensor)

    @abstractmethod
    def build_info(self) -> dict[str, bool]:
        """
        Report the capabilities the library was built with.

        Returns
        -------
        dict[str, bool]
            Mapping of capability label to whether it is present.
        """
        pass

    @abstractmethod
    def device_names(self) -> list[str]:
        """
        List the names of the visible GPU devices.

        Returns
        -------
        list[str]
            One name per device, ordered by device index.
        """
        pass
