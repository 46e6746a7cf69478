import json
from unittest.mock import patch

import pytest

from pool.records import Entity, Gate, NormalizedPin, PadMapEntry, Part, Unit
from pool.writer import record_paths, write_records


@pytest.fixture
def records():
    pins = {
        "pin-b": NormalizedPin("pin-b", "input", "BOOT0"),
        "pin-a": NormalizedPin("pin-a", "bidirectional", "PA0", ("ADC_IN0",)),
    }
    unit = Unit("unit-1", "ST", "STM32X", pins)
    gate = Gate("gate-1", unit="unit-1")
    entity = Entity("ent-1", "ST", "STM32X", "U", ("mcu",), {"gate-1": gate})
    part = Part("part-1", entity="ent-1", package="pkg", manufacturer="ST", mpn="STM32X",
                pad_map={"pad-1": PadMapEntry("gate-1", "pin-b"),
                         "pad-2": PadMapEntry("gate-1", "pin-a")})
    return unit, entity, part


def test_record_paths(tmp_path):
    paths = record_paths(tmp_path, "STM32X", "ic/mcu/stm")
    assert paths == {
        "unit": tmp_path / "units/ic/mcu/stm/STM32X.json",
        "entity": tmp_path / "entities/ic/mcu/stm/STM32X.json",
        "part": tmp_path / "parts/ic/mcu/stm/STM32X.json",
    }


def test_write_keeps_pin_order(tmp_path, records):
    written = write_records(tmp_path, *records, subdir="x")
    assert [p.parent.parent.name for p in written] == ["units", "entities", "parts"]
    unit = json.loads(written[0].read_text(encoding="utf-8"))
    assert list(unit["pins"]) == ["pin-b", "pin-a"]
    assert not list(tmp_path.rglob("*.tmp"))


def test_existing_files_are_overwritten(tmp_path, records):
    target = tmp_path / "parts/x/STM32X.json"
    target.parent.mkdir(parents=True)
    target.write_text("old", encoding="utf-8")
    write_records(tmp_path, *records, subdir="x")
    assert json.loads(target.read_text(encoding="utf-8"))["uuid"] == "part-1"


def test_staging_failure_publishes_nothing(tmp_path, records):
    from pool import writer

    real_stage = writer._stage
    calls = []

    def flaky(target, text):
        calls.append(target)
        if len(calls) == 3:
            raise OSError("disk full")
        return real_stage(target, text)

    with patch.object(writer, "_stage", side_effect=flaky):
        with pytest.raises(OSError, match="disk full"):
            write_records(tmp_path, *records, subdir="x")

    assert not list(tmp_path.rglob("*.json"))
    assert not list(tmp_path.rglob("*.tmp"))


def test_move_failure_removes_remaining_temporaries(tmp_path, records):
    from pool import writer

    real_replace = writer.os.replace
    calls = []

    def flaky(src, dst):
        calls.append(dst)
        if len(calls) == 2:
            raise OSError("device busy")
        return real_replace(src, dst)

    with patch.object(writer.os, "replace", side_effect=flaky):
        with pytest.raises(OSError, match="device busy"):
            write_records(tmp_path, *records, subdir="x")

    assert not list(tmp_path.rglob("*.tmp"))
    assert (tmp_path / "units/x/STM32X.json").exists()
    assert not (tmp_path / "entities/x/STM32X.json").exists()
