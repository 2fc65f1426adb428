"""
PyTorch implementation of the TensorBackend interface.

Every query goes straight to `torch`; nothing is cached and nothing is
caught, so a broken CUDA installation surfaces as torch's own error.
"""
import torch

from src.domain.interfaces.tensor_backend import TensorBackend


class TorchBackend(TensorBackend):
    """Tensor backend for PyTorch and its CUDA runtime."""

    name = "Torch"
    accelerator = "CUDA"

    def version(self) -> str:
        return str(torch.__version__)

    def is_available(self) -> bool:
        return torch.cuda.is_available()

    def device_count(self) -> int:
        return torch.cuda.device_count()

    def random_tensor(self, shape: tuple[int, ...]) -> torch.Tensor:
        """Allocate a CPU tensor of uniform values in [0, 1) with torch's default dtype."""
        return torch.rand(*shape)

    def to_accelerator(self, tensor: torch.Tensor, device_index: int = 0) -> torch.Tensor:
        """
        Copy `tensor` into the memory of CUDA device `device_index`.

        Parameters
        ----------
        tensor : torch.Tensor
            CPU tensor to transfer.
        device_index : int, optional
            Index of the target GPU. Default is 0.

        Returns
        -------
        torch.Tensor
            Tensor whose `device` is `cuda:<device_index>`.
        """
        return tensor.cuda(device_index)

    def matmul_transposed(self, tensor: torch.Tensor) -> torch.Tensor:
        """Multiply `tensor` by its transpose on the device it lives on."""
        return tensor @ tensor.T

    def to_host(self, tensor: torch.Tensor) -> torch.Tensor:
        return tensor.cpu()

    def statistics(self, tensor: torch.Tensor) -> dict[str, float]:
        return {
            "Mean": tensor.mean().item(),
            "Max": tensor.max().item(),
            "Min": tensor.min().item(),
        }

    def build_info(self) -> dict[str, bool]:
        return {
            "cuDNN Available": torch.backends.cudnn.is_available(),
            "Built With CUDA": torch.backends.cuda.is_built(),
            "Built With MKL": torch.backends.mkl.is_available(),
            "MPS Available": torch.backends.mps.is_available(),
        }

    def device_names(self) -> list[str]:
        return [torch.cuda.get_device_name(index) for index in range(torch.cuda.device_count())]
