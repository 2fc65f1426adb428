"""Lookup of tensor backends by name."""
import logging

from src.domain.interfaces.tensor_backend import TensorBackend

logger = logging.getLogger(__name__)

AVAILABLE_BACKENDS = ("torch", "tensorflow")


def create_backend(name: str) -> TensorBackend:
    """
    Create the tensor backend registered under `name`.

    The numeric library is only imported here, so selecting one backend
    never requires the other library to be installed.

    Parameters
    ----------
    name : str
        Backend name, case-insensitive: "torch" or "tensorflow".

    Returns
    -------
    TensorBackend
        A new backend instance.

    Raises
    ------
    ValueError
        If no backend is registered under `name`.
    """
    key = name.lower()
    if key not in AVAILABLE_BACKENDS:
        raise ValueError(f"Backend {name} not found. Available: {list(AVAILABLE_BACKENDS)}")

    logger.debug(f"Loading {key} backend")
    if key == "torch":
        from src.infrastructure.torch.backend import TorchBackend

        return TorchBackend()

    # Suppress TensorFlow logging before importing TF
    from src.infrastructure.tensorflow.observability import suppress_tensorflow_logging

    suppress_tensorflow_logging()
    from src.infrastructure.tensorflow.backend import TensorFlowBackend

    return TensorFlowBackend()
