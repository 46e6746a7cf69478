import itertools
import json

import pytest

from main import create_app

MCU_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Mcu xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
     xmlns="http://mcd.rou.st.com/modules.php?name=mcu"
     ClockTree="STM32F0" Family="STM32F0" RefName="STM32F030F4Px" Package="TSSOP20">
    <Core>Arm Cortex-M0</Core>
    <Pin Name="PA1" Position="PA1" Type="Reset"/>
    <Pin Name="PA2-ADC1" Position="PA2" Type="I/O">
        <Signal Name="ADC1_IN2"/>
    </Pin>
</Mcu>
"""


@pytest.fixture
def package_record():
    """Two-pad package matching MCU_XML."""
    return {
        "uuid": "pkg-0001",
        "name": "TSSOP-20",
        "pads": {
            "padA": {"name": "PA1", "padstack": "ps-1"},
            "padB": {"name": "PA2", "padstack": "ps-1"},
        },
    }


@pytest.fixture
def mcu_xml():
    return MCU_XML


@pytest.fixture
def pin_entries():
    return [
        {"Type": "Reset", "Name": "PA1", "Position": "PA1"},
        {"Type": "I/O", "Name": "PA2-ADC1", "Position": "PA2",
         "Signal": [{"Name": "ADC1_IN2"}]},
    ]


def sequential_uuids(prefix="00000000-0000-4000-8000"):
    """Predictable, well-formed uuids: …-000000000001, …-000000000002, …"""
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter):012d}"


@pytest.fixture
def uuids():
    """Deterministic identifier factory."""
    return sequential_uuids()


@pytest.fixture
def uuid_factory():
    """Callable returning a fresh deterministic factory on each call."""
    return sequential_uuids


@pytest.fixture
def pool_dir(tmp_path, package_record):
    """A pool root containing the sample package and the CubeMX XML."""
    pkg_dir = tmp_path / "packages" / "tssop20"
    pkg_dir.mkdir(parents=True)
    (pkg_dir / "package.json").write_text(json.dumps(package_record), encoding="utf-8")
    (tmp_path / "STM32F030F4Px.xml").write_text(MCU_XML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def client():
    """Return a Flask test client."""
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()
