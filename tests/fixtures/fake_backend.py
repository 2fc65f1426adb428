"""FakeBackend - in-memory tensor backend for testing.

Tensors are NumPy arrays wrapped with the device they were placed on, so
tests can exercise both the GPU and the no-GPU paths on any machine.
"""
from dataclasses import dataclass

import numpy as np

from src.domain.interfaces.tensor_backend import TensorBackend


@dataclass
class FakeTensor:
    """NumPy array tagged with a device name."""

    data: np.ndarray
    device: str = "cpu"

    @property
    def shape(self) -> tuple[int, ...]:
        return self.data.shape

    def __str__(self) -> str:
        return f"FakeTensor({self.data}, device='{self.device}')"


class FakeBackend(TensorBackend):
    """
    Tensor backend with a configurable number of fake GPUs.

    Every call is recorded in `calls`, in order, so tests can check which
    queries the diagnostic made.
    """

    name = "Fake"
    accelerator = "FGPU"

    def __init__(self, num_devices: int = 0, fail_transfer: bool = False):
        self.num_devices = num_devices
        self.fail_transfer = fail_transfer
        self.calls: list[str] = []

    def version(self) -> str:
        self.calls.append("version")
        return "0.1.0"

    def is_available(self) -> bool:
        self.calls.append("is_available")
        return self.num_devices > 0

    def device_count(self) -> int:
        self.calls.append("device_count")
        return self.num_devices

    def random_tensor(self, shape: tuple[int, ...]) -> FakeTensor:
        self.calls.append("random_tensor")
        return FakeTensor(np.random.rand(*shape).astype(np.float32))

    def to_accelerator(self, tensor: FakeTensor, device_index: int = 0) -> FakeTensor:
        self.calls.append("to_accelerator")
        if self.fail_transfer or device_index >= self.num_devices:
            raise RuntimeError(f"invalid device ordinal {device_index}")
        return FakeTensor(tensor.data.copy(), device=f"fgpu:{device_index}")

    def build_info(self) -> dict[str, bool]:
        self.calls.append("build_info")
        return {"Built With FGPU": True}

    def device_names(self) -> list[str]:
        self.calls.append("device_names")
        return [f"Fake GPU {index}" for index in range(self.num_devices)]

    def matmul_transposed(self, tensor: FakeTensor) -> FakeTensor:
        self.calls.append("matmul_transposed")
        return FakeTensor(tensor.data @ tensor.data.T, device=tensor.device)

    def to_host(self, tensor: FakeTensor) -> FakeTensor:
        self.calls.append("to_host")
        return FakeTensor(tensor.data.copy(), device="cpu")

    def statistics(self, tensor: FakeTensor) -> dict[str, float]:
        self.calls.append("statistics")
        return {
            "Mean": float(tensor.data.mean()),
            "Max": float(tensor.data.max()),
            "Min": float(tensor.data.min()),
        }
