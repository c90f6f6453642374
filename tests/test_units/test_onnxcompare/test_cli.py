"""Tests for the command-line entry point.

Test Coverage:
- TestMain: 6 tests - Text and JSON output, exit statuses
"""

import json

from onnxcompare.cli import main


class TestMain:
    """Test ``onnxcompare MODEL1 MODEL2``."""

    def test_text_report(self, conv_model_path, conv_model_double_path, capsys):
        assert main([conv_model_path, conv_model_double_path]) == 0
        out = capsys.readouterr().out
        assert out.startswith("ONNX Model Comparison")
        assert "Model 1: conv_a.onnx" in out
        assert "type: Float -> Double" in out

    def test_json_report(self, conv_model_path, conv_model_double_path, capsys):
        assert main([conv_model_path, conv_model_double_path, "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["graphs"]["inputs"]["entries"]["X"]["status"] == "modified"
        assert data["graphs"]["nodes"]["entries"]["Conv_0"]["status"] == "unchanged"

    def test_json_report_with_verbose(self, conv_model_path, conv_model_double_path, capsys):
        assert main([conv_model_path, conv_model_double_path, "--json", "-v"]) == 0
        captured = capsys.readouterr()
        data = json.loads(captured.out)
        assert data["graphs"]["inputs"]["entries"]["X"]["status"] == "modified"
        assert "Loaded:" in captured.err
        assert "inputs: 1 differences" in captured.err

    def test_missing_file(self, conv_model_path, tmp_path, capsys):
        missing = str(tmp_path / "missing.onnx")
        assert main([conv_model_path, missing]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error comparing ONNX models:" in captured.err

    def test_exit_code_on_differences(self, conv_model_path, conv_model_double_path, capsys):
        assert main([conv_model_path, conv_model_double_path, "--exit-code"]) == 1

    def test_exit_code_when_identical(self, conv_model_path, capsys):
        assert main([conv_model_path, conv_model_path, "--exit-code"]) == 0
