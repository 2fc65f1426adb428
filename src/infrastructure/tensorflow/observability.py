"""
Observability helpers for the TensorFlow backend.

TensorFlow prints CPU feature, cuDNN and device placement messages through
its own C++ logger. Those would interleave with the diagnostic output, so
they are silenced before TensorFlow is imported.
"""
import logging
import os


def suppress_tensorflow_logging() -> None:
    """
    Suppress verbose TensorFlow logging messages.

    This redirects TensorFlow's internal logging to Python's logging system
    and sets the log level to ERROR to hide INFO/WARNING messages like:
    - "Loaded cuDNN version..."
    - "Created device /job:localhost/replica:0/task:0/device:GPU:0"
    - CPU/GPU feature warnings

    Should be called before importing TensorFlow. An explicit
    TF_CPP_MIN_LOG_LEVEL set by the user is kept.
    """
    # 0=ALL, 1=WARNING+, 2=ERROR+, 3=FATAL
    os.environ.setdefault("TF_CPP_MIN_LOG_LEVEL", "2")

    logging.getLogger("tensorflow").setLevel(logging.ERROR)
    logging.getLogger("absl").setLevel(logging.ERROR)
