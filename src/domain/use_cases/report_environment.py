"""
Report Environment Use-Case.

Prints the environment variables that influence GPU discovery, the
capabilities the numeric library was built with, and the names of the
visible devices.
"""
import logging
from typing import Callable, Mapping

from src.domain.entities.report import EnvironmentReport
from src.domain.interfaces.tensor_backend import TensorBackend

logger = logging.getLogger(__name__)

ENVIRONMENT_VARIABLES = (
    "CUDA_VISIBLE_DEVICES",
    "CUDA_HOME",
    "LD_LIBRARY_PATH",
    "PYTORCH_CUDA_ALLOC_CONF",
    "TF_CPP_MIN_LOG_LEVEL",
)


class ReportEnvironment:
    """
    Use-case for reporting the runtime environment seen by a backend.

    Attributes
    ----------
    backend : TensorBackend
        The numeric library under test.
    environ : Mapping[str, str]
        Process environment to read variables from.
    write : Callable[[str], None]
        Sink receiving each output line.
    """

    def __init__(
        self,
        backend: TensorBackend,
        environ: Mapping[str, str],
        write: Callable[[str], None] = print,
    ) -> None:
        self.backend = backend
        self.environ = environ
        self.write = write

    def run(self) -> EnvironmentReport:
        """
        Collect and print the environment report.

        Device names are only queried when the backend reports a GPU.

        Returns
        -------
        EnvironmentReport
            The values that were printed.
        """
        variables = {name: self.environ.get(name) for name in ENVIRONMENT_VARIABLES}
        build_info = self.backend.build_info()
        device_names = self.backend.device_names() if self.backend.is_available() else []
        logger.debug(f"Found {len(device_names)} named {self.backend.accelerator} device(s)")

        report = EnvironmentReport(
            variables=variables,
            build_info=build_info,
            device_names=device_names,
        )
        for line in report.lines():
            self.write(line)
        return report
