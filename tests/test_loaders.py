import pytest

from import_engine.errors import FormatError, SchemaError
from import_engine.package_loader import build_pad_index, load_package, read_package
from import_engine.pin_table import parse_pin_table, pins_from_entries, read_pin_table
from pool.records import RawPin


# ── Package ────────────────────────────────────────────────────────────

def test_pad_index_maps_name_to_uuid(package_record):
    package = load_package(package_record)
    assert package.uuid == "pkg-0001"
    assert package.pad_index == {"PA1": "padA", "PA2": "padB"}
    assert package.pad_count == 2


def test_package_without_pads_is_schema_error():
    with pytest.raises(SchemaError, match="pads"):
        load_package({"uuid": "x"})


def test_package_without_uuid_is_schema_error():
    with pytest.raises(SchemaError, match="uuid"):
        load_package({"pads": {}})


def test_pad_without_name_is_schema_error():
    with pytest.raises(SchemaError) as exc:
        build_pad_index({"padA": {"padstack": "ps"}})
    assert exc.value.details["pad"] == "padA"


@pytest.mark.parametrize("name", [None, ""])
def test_null_or_empty_pad_name_is_schema_error(name):
    with pytest.raises(SchemaError, match="has no name"):
        build_pad_index({"padA": {"name": "PA1"}, "padB": {"name": name}})


def test_duplicate_pad_name_is_rejected():
    with pytest.raises(SchemaError) as exc:
        build_pad_index({"padA": {"name": "1"}, "padB": {"name": "1"}})
    assert exc.value.code == SchemaError.DUPLICATE_PAD_NAME
    assert exc.value.details["pads"] == ["padA", "padB"]


def test_read_package_resolves_against_pool(pool_dir):
    package = read_package(pool_dir, "packages/tssop20/package.json")
    assert package.uuid == "pkg-0001"


def test_read_package_missing_file(pool_dir):
    with pytest.raises(SchemaError, match="Cannot read package"):
        read_package(pool_dir, "packages/nope.json")


def test_read_package_invalid_json(tmp_path):
    (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(SchemaError, match="not valid JSON"):
        read_package(tmp_path, "bad.json")


# ── Pin table ──────────────────────────────────────────────────────────

def test_parse_namespaced_cubemx_xml(mcu_xml):
    pins = parse_pin_table(mcu_xml)
    assert pins == [
        RawPin(position="PA1", name="PA1", pin_type="Reset", signals=()),
        RawPin(position="PA2", name="PA2-ADC1", pin_type="I/O", signals=("ADC1_IN2",)),
    ]


def test_parse_bytes_with_bom(mcu_xml):
    pins = parse_pin_table(b"\xef\xbb\xbf" + mcu_xml.encode("utf-8"))
    assert [p.position for p in pins] == ["PA1", "PA2"]


def test_declared_encoding_is_honoured():
    xml = ('<?xml version="1.0" encoding="ISO-8859-1"?>'
           '<Mcu><Pin Name="P\xe41" Position="1" Type="I/O"/></Mcu>').encode("latin-1")
    assert parse_pin_table(xml)[0].name == "Pä1"


def test_invalid_utf8_is_format_error():
    xml = b'<Mcu><Pin Name="P\xff1" Position="1" Type="I/O"/></Mcu>'
    with pytest.raises(FormatError, match="not valid XML"):
        parse_pin_table(xml)


def test_unknown_type_is_not_a_format_error():
    pins = parse_pin_table('<Mcu><Pin Name="X" Position="1" Type="Analog"/></Mcu>')
    assert pins[0].pin_type == "Analog"


@pytest.mark.parametrize("xml, match", [
    ("", "empty"),
    ("<Mcu><Pin", "not valid XML"),
    ('<Board><Pin Name="A" Position="1" Type="I/O"/></Board>', "Mcu"),
    ("<Mcu><Core>M0</Core></Mcu>", "no pins"),
    ('<Mcu><Pin Name="A" Type="I/O"/></Mcu>', "Position"),
    ('<Mcu><Pin Position="1" Type="I/O"><Signal/></Pin></Mcu>', "Name"),
])
def test_malformed_pin_table(xml, match):
    with pytest.raises(FormatError, match=match):
        parse_pin_table(xml)


def test_signal_without_name_is_format_error():
    xml = '<Mcu><Pin Name="A" Position="1" Type="I/O"><Signal IOModes="x"/></Pin></Mcu>'
    with pytest.raises(FormatError, match="Signal without a Name"):
        parse_pin_table(xml)


def test_entries_form(pin_entries):
    pins = pins_from_entries(pin_entries)
    assert pins[1].signals == ("ADC1_IN2",)
    assert pins[0].signals == ()


def test_entry_missing_type_reports_index():
    with pytest.raises(FormatError) as exc:
        pins_from_entries([{"Name": "A", "Position": "1"}])
    assert exc.value.details == {"pin": 1, "missing": ["Type"]}


@pytest.mark.parametrize("source", [5, True, None, {"Type": "I/O"}, "PA1"])
def test_entries_must_be_a_list(source):
    with pytest.raises(FormatError, match="list of pin entries"):
        pins_from_entries(source)


def test_signal_must_be_a_list():
    with pytest.raises(FormatError, match="Signal must be a list"):
        pins_from_entries([{"Type": "I/O", "Name": "A", "Position": "1", "Signal": 7}])


def test_read_pin_table_missing_file(tmp_path):
    with pytest.raises(FormatError, match="Cannot read pin table"):
        read_pin_table(tmp_path / "missing.xml")
