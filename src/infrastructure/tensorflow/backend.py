"""
TensorFlow implementation of the TensorBackend interface.

Import this module through `src.infrastructure.backends.create_backend`,
which silences TensorFlow's native logging before the import happens.
"""
from __future__ import annotations

import tensorflow as tf

from src.domain.interfaces.tensor_backend import TensorBackend


class TensorFlowBackend(TensorBackend):
    """Tensor backend for TensorFlow and its GPU devices."""

    name = "TensorFlow"
    accelerator = "GPU"

    def version(self) -> str:
        return tf.__version__

    def _gpus(self) -> list:
        return tf.config.list_physical_devices("GPU")

    def is_available(self) -> bool:
        return len(self._gpus()) > 0

    def device_count(self) -> int:
        return len(self._gpus())

    def random_tensor(self, shape: tuple[int, ...]) -> tf.Tensor:
        """
        Allocate a tensor of uniform values in [0, 1) on the CPU.

        Parameters
        ----------
        shape : tuple[int, ...]
            Size of each dimension.

        Returns
        -------
        tf.Tensor
            float32 tensor placed on `/CPU:0`.
        """
        with tf.device("/CPU:0"):
            return tf.random.uniform(shape, dtype=tf.float32)

    def to_accelerator(self, tensor: tf.Tensor, device_index: int = 0) -> tf.Tensor:
        """
        Copy `tensor` into the memory of GPU `device_index`.

        TensorFlow tensors are immutable, so the copy is made with
        `tf.identity` under an explicit device scope. Eager execution places
        ops softly, so a missing GPU would quietly yield a CPU tensor; the
        placement of the result is checked instead.

        Raises
        ------
        RuntimeError
            If the copy did not land on the requested GPU.
        """
        with tf.device(f"/GPU:{device_index}"):
            result = tf.identity(tensor)

        placed_on = tf.DeviceSpec.from_string(result.device)
        if placed_on.device_type != "GPU" or placed_on.device_index != device_index:
            raise RuntimeError(
                f"Tensor was placed on {result.device or 'an unknown device'} "
                f"instead of GPU:{device_index}"
            )
        return result

    def matmul_transposed(self, tensor: tf.Tensor) -> tf.Tensor:
        with tf.device(tensor.device):
            return tf.matmul(tensor, tensor, transpose_b=True)

    def to_host(self, tensor: tf.Tensor) -> tf.Tensor:
        with tf.device("/CPU:0"):
            return tf.identity(tensor)

    def statistics(self, tensor: tf.Tensor) -> dict[str, float]:
        return {
            "Mean": float(tf.reduce_mean(tensor)),
            "Max": float(tf.reduce_max(tensor)),
            "Min": float(tf.reduce_min(tensor)),
        }

    def build_info(self) -> dict[str, bool]:
        return {
            "Built With CUDA": tf.test.is_built_with_cuda(),
            "Built With GPU Support": tf.test.is_built_with_gpu_support(),
        }

    def device_names(self) -> list[str]:
        names = []
        for gpu in self._gpus():
            details = tf.config.experimental.get_device_details(gpu)
            names.append(details.get("device_name", gpu.name))
        return names
