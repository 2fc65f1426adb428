"""Tensor entity - framework-independent abstraction."""
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Tensor(Protocol):
    """
    Framework-independent tensor/array abstraction.

    A tensor is an opaque buffer owned by the numeric library. The diagnostic
    only reads its shape and where it lives; its values are read by printing
    it, which synchronizes with the device that holds them.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Get the tensor's shape.

        Returns:
            shape (tuple[int, ...]): Tuple of integers representing the size of each dimension.
        """
        ...

    @property
    def device(self) -> Any:
        """
        Get the device holding the tensor's memory.

        Returns:
            device (Any): Library-specific device descriptor, e.g. `torch.device("cuda", 0)`
            for PyTorch or "/job:localhost/replica:0/task:0/device:GPU:0" for TensorFlow.
            It always names the device of the backend that produced or last moved the tensor.
        """
        ...
