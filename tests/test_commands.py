"""Tests for the command dispatch boundary."""

from __future__ import annotations

import base64
import csv
import json

import pytest

from trial_curves.commands import COMMANDS, invoke, invoke_sync


def _cell(presses: list[int]) -> str:
    """Encode one trial record as cell text."""

    return json.dumps({"sum_presses": sum(presses), "detailed": {"presses": presses, "Xs": [], "Ls": []}})


def _write_table(path) -> None:
    """Write the worked-example table."""

    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(["subject", "trial"])
        writer.writerow(["a", _cell([2, 4, 6, 8])])
        writer.writerow(["b", _cell([0, 2, 4, 6])])
        writer.writerow(["c", "not a record"])


def test_commands_registry_lists_front_end_commands() -> None:
    """All three front-end commands should be registered."""

    assert sorted(COMMANDS) == ["get_data", "get_header", "save_image"]


@pytest.mark.asyncio
async def test_invoke_get_header(tmp_path) -> None:
    """get_header should return the column names."""

    path = tmp_path / "table.csv"
    _write_table(path)

    response = await invoke("get_header", {"path": str(path)})

    assert response == {"ok": True, "result": ["subject", "trial"]}


@pytest.mark.asyncio
async def test_invoke_get_data_accepts_camel_case_curves(tmp_path) -> None:
    """get_data should return average/standardError per bin per curve."""

    path = tmp_path / "table.csv"
    _write_table(path)

    response = await invoke(
        "get_data",
        {"path": str(path), "curveConfigs": [{"columnId": 1, "unit": 2, "maxLength": 0}]},
    )

    assert response["ok"] is True
    assert response["result"] == [
        [
            {"average": pytest.approx(4.0), "standardError": pytest.approx(2.0)},
            {"average": pytest.approx(12.0), "standardError": pytest.approx(2.0)},
        ]
    ]


@pytest.mark.asyncio
async def test_invoke_get_data_reports_tagged_errors(tmp_path) -> None:
    """Failures should come back as one kind/message value."""

    path = tmp_path / "table.csv"
    _write_table(path)

    no_curves = await invoke("get_data", {"path": str(path), "curve_configs": []})
    bad_column = await invoke("get_data", {"path": str(path), "curve_configs": [{"column_id": 9}]})
    missing = await invoke("get_data", {"path": str(tmp_path / "nope.csv"), "curve_configs": [{"column_id": 1}]})

    assert no_curves == {
        "ok": False,
        "error": {"kind": "invalid_configuration", "message": "no curve is requested"},
    }
    assert bad_column["error"]["kind"] == "invalid_configuration"
    assert "column id 9" in bad_column["error"]["message"]
    assert missing["error"]["kind"] == "table_read"


@pytest.mark.asyncio
async def test_invoke_rejects_unknown_command_and_arguments() -> None:
    """Unknown commands and arguments are configuration errors."""

    unknown = await invoke("plot", {})
    extra = await invoke("get_header", {"path": "x.csv", "sheet": 1})
    missing = await invoke("get_header")

    assert unknown["error"]["kind"] == "invalid_configuration"
    assert "unknown command 'plot'" in unknown["error"]["message"]
    assert "unknown keys" in extra["error"]["message"]
    assert "missing required argument 'path'" in missing["error"]["message"]


def test_invoke_sync_save_image(tmp_path) -> None:
    """save_image should write the file and report encoding errors."""

    payload = b"image-bytes"
    image = "data:image/png;base64," + base64.b64encode(payload).decode("ascii")
    out = tmp_path / "plot.png"

    ok = invoke_sync("save_image", {"path": str(out), "image": image})
    bad = invoke_sync("save_image", {"path": str(out), "image": "no-comma"})

    assert ok == {"ok": True, "result": None}
    assert out.read_bytes() == payload
    assert bad["ok"] is False
    assert bad["error"]["kind"] == "encoding"


@pytest.mark.asyncio
async def test_invoke_get_data_skips_rows_with_oversized_counts(tmp_path) -> None:
    """A row whose presses overflow 32 bits is skipped, not fatal."""

    path = tmp_path / "table.csv"
    _write_table(path)
    with path.open("a", encoding="utf-8", newline="") as handle:
        csv.writer(handle).writerow(["d", _cell([10**20, 1])])

    response = await invoke("get_data", {"path": str(path), "curve_configs": [{"column_id": 1, "unit": 2}]})

    assert response["ok"] is True
    assert response["result"] == [
        [
            {"average": pytest.approx(4.0), "standardError": pytest.approx(2.0)},
            {"average": pytest.approx(12.0), "standardError": pytest.approx(2.0)},
        ]
    ]


@pytest.mark.asyncio
async def test_invoke_reports_unexpected_errors_as_internal(monkeypatch) -> None:
    """A non-library exception from a handler becomes an internal error value."""

    async def broken(args):
        raise RuntimeError("boom")

    monkeypatch.setitem(COMMANDS, "get_header", broken)

    response = await invoke("get_header", {"path": "x.csv"})

    assert response == {"ok": False, "error": {"kind": "internal", "message": "RuntimeError: boom"}}
