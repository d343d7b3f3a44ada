import pytest

from statbar.models import Battery
from statbar.parsers import parse_int, parse_refresh_rate, is_noise_interface, parse_pmset


@pytest.mark.parametrize("text, want", [
    ("123", 123),
    ("0", 0),
    ("5", 5),
    ("  42", 42),
    ("42  ", 42),
    ("  42  ", 42),
    ("@60", 60),
    ("120Hz", 120),
    ("@60Hz", 60),
    ("60.00", 60),
    ("119.88hz", 119),
    ("", 0),
    ("   ", 0),
    ("abc", 0),
    ("-5", 5),
])
def test_parse_int(text, want):
    assert parse_int(text) == want


def test_parse_int_only_reads_first_number():
    assert parse_int("1920x1080") == 1920
    assert parse_int("cycles: 12 of 1000") == 12


@pytest.mark.parametrize("text, want", [
    ("Resolution: 1920x1080 @ 60Hz", "60Hz"),
    ("Resolution: 2560x1600 @ 120Hz", "120Hz"),
    ("Refresh Rate: 60 Hz", "60Hz"),
    ("Resolution: 3840x2160 @ 59.94Hz", "59Hz"),
    ("Resolution: 3456x2234 @ 120.00Hz", "120Hz"),
    ("Display 1: 60Hz\nDisplay 2: 120Hz", "120Hz"),
    ("", ""),
    ("Resolution: 1920x1080", ""),
    ("Rate: abcHz", ""),
    ("Rate: 600Hz", ""),
    ("60hz", "60Hz"),
    ("60HZ", "60Hz"),
])
def test_parse_refresh_rate(text, want):
    assert parse_refresh_rate(text) == want


def test_parse_refresh_rate_picks_maximum_regardless_of_order():
    assert parse_refresh_rate("A: 144Hz\nB: 60Hz\nC: 75 hz") == "144Hz"
    assert parse_refresh_rate("A: 60Hz\nB: 0Hz\nC: 900Hz") == "60Hz"


def test_parse_refresh_rate_ceiling():
    assert parse_refresh_rate("240Hz") == "240Hz"
    assert parse_refresh_rate("241Hz") == ""
    assert parse_refresh_rate("360Hz", max_hz=500) == "360Hz"


def test_parse_refresh_rate_system_profiler_output():
    text = """Graphics/Displays:

    Apple M2 Pro:

      Chipset Model: Apple M2 Pro
      Displays:
        Color LCD:
          Display Type: Built-in Liquid Retina XDR Display
          Resolution: 3456 x 2234 Retina
          Main Display: Yes
        DELL U2720Q:
          Resolution: 3840 x 2160 (2160p/4K UHD 1 - Ultra High Definition)
          UI Looks like: 1920 x 1080 @ 60.00Hz
"""
    assert parse_refresh_rate(text) == "60Hz"


@pytest.mark.parametrize("name", [
    "lo0", "awdl0", "utun0", "llw0", "bridge0", "gif0", "stf0", "xhc0", "anpi0", "ap1", "ap-2",
    "LO0", "Awdl0",
])
def test_noise_interfaces(name):
    assert is_noise_interface(name)


@pytest.mark.parametrize("name", ["en0", "en1", "en5", "", "eth0", "wlan0"])
def test_user_facing_interfaces(name):
    assert not is_noise_interface(name)


def test_noise_interface_is_prefix_match_only():
    assert not is_noise_interface("en0-lo")
    assert not is_noise_interface("myutun0")


def test_noise_interface_custom_prefixes():
    assert is_noise_interface("vmnet8", prefixes=["vmnet"])
    assert not is_noise_interface("lo0", prefixes=["vmnet"])


CHARGING = """Now drawing from 'AC Power'
 -InternalBattery-0 (id=1234)\t85%; charging; 0:45 remaining present: true"""

DISCHARGING = """Now drawing from 'Battery Power'
 -InternalBattery-0 (id=1234)\t45%; discharging; 2:30 remaining present: true"""

CHARGED = """Now drawing from 'AC Power'
 -InternalBattery-0 (id=1234)\t100%; charged; present: true"""


def test_parse_pmset_charging():
    got = parse_pmset(CHARGING, "Good", 150, 92)
    assert got == [Battery(percent=85, status="charging", time_left="0:45",
                           health="Good", cycle_count=150, capacity=92)]


def test_parse_pmset_discharging():
    (b,) = parse_pmset(DISCHARGING, "Normal", 200, 88)
    assert b.percent == 45
    assert b.status == "discharging"
    assert b.time_left == "2:30"
    assert (b.health, b.cycle_count, b.capacity) == ("Normal", 200, 88)


def test_parse_pmset_charged_has_no_time_left():
    (b,) = parse_pmset(CHARGED, "Good", 50, 100)
    assert b.percent == 100
    assert b.status == "charged"
    assert b.time_left == ""


@pytest.mark.parametrize("raw", ["", "Now drawing from 'AC Power'\nNo batteries found.", "\n\n"])
def test_parse_pmset_no_battery_line(raw):
    assert parse_pmset(raw, "", 0, 0) == []


def test_parse_pmset_no_estimate_and_unknown_status():
    raw = (" -InternalBattery-0 (id=42)\t63%; discharging; (no estimate) present: true\n"
           " -InternalBattery-0 (id=42)\t80%; AC attached; not charging present: true")
    first, second = parse_pmset(raw, "Good", 1, 99)
    assert (first.status, first.time_left) == ("discharging", "")
    assert (second.percent, second.status, second.time_left) == (80, "AC attached", "")


def test_parse_pmset_multiple_batteries_share_side_channel():
    raw = (" -InternalBattery-0 (id=1)\t50%; discharging; 1:10 remaining present: true\n"
           " -ExternalBattery-1 (id=2)\t20%; charging; 3:05 remaining present: true")
    got = parse_pmset(raw, "Service Recommended", 1001, 71)
    assert [b.percent for b in got] == [50, 20]
    assert [b.time_left for b in got] == ["1:10", "3:05"]
    assert all((b.health, b.cycle_count, b.capacity) == ("Service Recommended", 1001, 71) for b in got)


def test_battery_is_immutable():
    (b,) = parse_pmset(CHARGED, "Good", 50, 100)
    with pytest.raises(AttributeError):
        b.percent = 1


def test_noise_interface_prefixes_ignore_case():
    assert is_noise_interface("lo0", prefixes=["LO", "VMNET"])
    assert is_noise_interface("vmnet8", prefixes=["LO", "VMNET"])
    assert not is_noise_interface("en0", prefixes=["LO", "VMNET"])


def test_parse_pmset_fractional_percent():
    raw = " -InternalBattery-0 (id=1234)\t85.5%; discharging; 3:12 remaining present: true"
    (b,) = parse_pmset(raw, "Good", 3, 97)
    assert b.percent == 85.5
    assert isinstance(b.percent, float)
    assert (b.status, b.time_left) == ("discharging", "3:12")
