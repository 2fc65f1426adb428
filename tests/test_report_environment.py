"""Tests for the ReportEnvironment use-case."""
from src.domain.use_cases.report_environment import ENVIRONMENT_VARIABLES, ReportEnvironment


def test_reads_known_variables(cpu_only_backend, output_lines):
    """Every known variable is reported, set or not."""
    environ = {"CUDA_VISIBLE_DEVICES": "1", "UNRELATED": "x"}

    report = ReportEnvironment(
        backend=cpu_only_backend, environ=environ, write=output_lines.append
    ).run()

    assert set(report.variables) == set(ENVIRONMENT_VARIABLES)
    assert report.variables["CUDA_VISIBLE_DEVICES"] == "1"
    assert report.variables["CUDA_HOME"] is None
    assert "UNRELATED" not in " ".join(output_lines)


def test_build_info_is_printed(cpu_only_backend, output_lines):
    """Build capabilities are printed as boolean literals."""
    ReportEnvironment(backend=cpu_only_backend, environ={}, write=output_lines.append).run()

    assert "Built With FGPU: true" in output_lines


def test_device_names_skipped_without_gpu(cpu_only_backend, output_lines):
    """Device names are not queried when no GPU is available."""
    report = ReportEnvironment(
        backend=cpu_only_backend, environ={}, write=output_lines.append
    ).run()

    assert report.device_names == []
    assert "device_names" not in cpu_only_backend.calls


def test_device_names_with_gpu(gpu_backend, output_lines):
    """Each visible device is listed by index."""
    ReportEnvironment(backend=gpu_backend, environ={}, write=output_lines.append).run()

    assert output_lines[-2:] == ["Device 0: Fake GPU 0", "Device 1: Fake GPU 1"]
