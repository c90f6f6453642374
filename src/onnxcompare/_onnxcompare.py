__docformat__ = "restructuredtext"
__all__ = ["OnnxCompare"]

from pathlib import Path

from onnx import ModelProto

from onnxcompare.compare import ComparisonResult, compare_onnx_models
from onnxcompare.normalize import load_onnx_model
from onnxcompare.report import render_text


class OnnxCompare:
    def __init__(self, verbose: bool = False, check_model: bool = False):
        self.verbose = verbose
        self.check_model = check_model

    def load(self, onnx_path: str | Path) -> ModelProto:
        """Decode one ONNX file.

        :param onnx_path: Path to ONNX model
        :return: Decoded model
        """
        model = load_onnx_model(onnx_path, check_model=self.check_model)
        if self.verbose:
            print(f"Loaded: {onnx_path} ({len(model.graph.node)} nodes)")
        return model

    def compare(self, onnx_path1: str | Path, onnx_path2: str | Path) -> ComparisonResult:
        """Compare two ONNX files.

        Both files are decoded before the comparison starts; a decode failure
        raises before any comparison work is done.

        :param onnx_path1: Path to the first ONNX model
        :param onnx_path2: Path to the second ONNX model
        :return: Comparison result
        """
        model1 = self.load(onnx_path1)
        model2 = self.load(onnx_path2)
        result = compare_onnx_models(model1, model2)

        if self.verbose:
            for name, category in result.graphs.categories():
                print(f"{name}: {len(category.differences)} differences")

        return result

    def report(
        self,
        onnx_path1: str | Path,
        onnx_path2: str | Path,
        show_unchanged: bool = False,
    ) -> str:
        """Compare two ONNX files and render a plain-text report.

        :param onnx_path1: Path to the first ONNX model
        :param onnx_path2: Path to the second ONNX model
        :param show_unchanged: Whether to list unchanged entries too
        :return: Report text
        """
        result = self.compare(onnx_path1, onnx_path2)
        return render_text(
            result,
            model1_name=Path(onnx_path1).name,
            model2_name=Path(onnx_path2).name,
            show_unchanged=show_unchanged,
        )

    @staticmethod
    def compare_models(model1: ModelProto, model2: ModelProto) -> ComparisonResult:
        """Compare two already decoded models.

        :param model1: First model
        :param model2: Second model
        :return: Comparison result
        """
        return compare_onnx_models(model1, model2)
