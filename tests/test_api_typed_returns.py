"""Test that API functions return typed dataclasses."""

from padcalc_pkg.api import evaluate
from padcalc_pkg.types import EvalResult


class TestAPITypedReturns:
    """Test that evaluate() returns EvalResult in every case."""

    def test_evaluate_returns_eval_result(self):
        result = evaluate("2 + 2")
        assert isinstance(result, EvalResult)
        assert result.ok is True
        assert result.result == "4.000000"
        assert result.error is None

    def test_evaluate_error_returns_eval_result(self):
        result = evaluate("5 & 3")
        assert isinstance(result, EvalResult)
        assert result.ok is False
        assert result.error_code == "UNSUPPORTED_OPERATOR"
        assert result.result is None

    def test_division_by_zero_is_ok(self):
        result = evaluate("5/0")
        assert result.ok is True
        assert result.result == "0.000000"

    def test_to_dict(self):
        assert evaluate("6*7").to_dict() == {"ok": True, "result": "42.000000"}
        data = evaluate("").to_dict()
        assert data["ok"] is False
        assert data["error_code"] == "EMPTY_INPUT"
        assert "result" not in data

    def test_repr(self):
        assert repr(evaluate("1+1")) == "EvalResult(ok=True, result='2.000000')"
        assert "ok=False" in repr(evaluate("x"))
