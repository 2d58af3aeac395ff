"""Tests for the format_result dispatcher and OutputSettings."""

import json

from roadctl.output.formatters import OutputSettings, format_result
from roadctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode(self) -> None:
        output = format_result(_ok("add_city", index=1, name="Kigali"), json_output=True)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"] == {"index": 1, "name": "Kigali"}

    def test_json_mode_error(self) -> None:
        output = format_result(_err("add_road", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_settings_win_over_kwarg(self) -> None:
        output = format_result(_ok("x"), settings=OutputSettings(), json_output=True)
        assert output.startswith("OK")

    def test_quiet_list(self) -> None:
        items = [{"index": 1, "name": "Kigali"}, {"index": 2, "name": "Huye"}]
        result = _ok("list_cities", items=items)
        assert format_result(result, settings=OutputSettings(quiet=True)) == "Kigali\nHuye"

    def test_quiet_index(self) -> None:
        result = _ok("add_city", index=8, name="Karongi")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "8"

    def test_quiet_error(self) -> None:
        output = format_result(_err("rename_city", "nope"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: rename_city — nope"

    def test_human_default(self) -> None:
        output = format_result(_ok("add_city", index=1, name="Kigali"))
        assert "OK" in output
        assert "Kigali" in output
