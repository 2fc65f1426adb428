"""Tests for report entities."""
from src.domain.entities.report import (
    ComputeReport,
    DiagnosticReport,
    EnvironmentReport,
    format_flag,
)


def test_format_flag():
    """Booleans are rendered as lowercase literals."""
    assert format_flag(True) == "true"
    assert format_flag(False) == "false"


class TestDiagnosticReport:
    """Tests for DiagnosticReport."""

    def test_lines_without_tensor(self):
        """Without a tensor, only the three query lines are rendered."""
        report = DiagnosticReport(
            library="Torch",
            accelerator="CUDA",
            version="2.4.0",
            available=False,
            device_count=0,
        )
        assert report.lines() == [
            "Torch Version: 2.4.0",
            "CUDA Available: false",
            "CUDA Device Count: 0",
        ]

    def test_lines_with_tensor(self):
        """With a tensor, the confirmation and printout follow."""
        report = DiagnosticReport(
            library="Torch",
            accelerator="CUDA",
            version="2.4.0",
            available=True,
            device_count=1,
            tensor=object(),
            tensor_text="tensor([[0.1, 0.2, 0.3],\n        [0.4, 0.5, 0.6]], device='cuda:0')",
        )
        lines = report.lines()
        assert lines[1] == "CUDA Available: true"
        assert lines[3] == "Created CUDA tensor successfully!"
        assert lines[4].endswith("device='cuda:0')")


class TestEnvironmentReport:
    """Tests for EnvironmentReport."""

    def test_unset_variables(self):
        """Missing variables are shown as <unset>."""
        report = EnvironmentReport(variables={"CUDA_HOME": None, "CUDA_VISIBLE_DEVICES": "0,1"})
        lines = report.lines()
        assert "CUDA_HOME: <unset>" in lines
        assert "CUDA_VISIBLE_DEVICES: 0,1" in lines

    def test_devices_section_only_with_devices(self):
        """The device section is omitted when no device is named."""
        assert "=== Devices ===" not in EnvironmentReport().lines()

        lines = EnvironmentReport(device_names=["NVIDIA A100"]).lines()
        assert lines[-2:] == ["=== Devices ===", "Device 0: NVIDIA A100"]


class TestComputeReport:
    """Tests for ComputeReport."""

    def test_statistics_are_rounded(self):
        report = ComputeReport(
            accelerator="CUDA",
            device_index=0,
            input_shape=(1000, 1000),
            result_shape=(1000, 1000),
            statistics={"Mean": 250.123456, "Max": 290.0, "Min": 212.5},
        )
        assert report.lines() == [
            "=== Compute Check ===",
            "Matrix Multiplication: 1000x1000 on CUDA device 0",
            "Result Shape: 1000x1000",
            "Mean: 250.1235",
            "Max: 290.0000",
            "Min: 212.5000",
            "CUDA compute check passed!",
        ]
