import pytest

from bipedctl.joystick import PACKET_SIZE, KeySwitch, RockerBtnData


def test_packet_size_is_forty_bytes():
    assert PACKET_SIZE == 40
    assert len(RockerBtnData().pack()) == 40


def test_bit_positions():
    assert KeySwitch.from_value(1).pressed() == ["r1"]
    assert KeySwitch.from_value(1 << 8).pressed() == ["a"]
    assert KeySwitch.from_value(1 << 15).pressed() == ["left"]


@pytest.mark.parametrize("word", [0, 1, 0x1234, 0xFFFF, 0x8001])
def test_key_switch_round_trip(word):
    assert KeySwitch.from_value(word).value == word


def test_key_switch_out_of_range():
    with pytest.raises(ValueError):
        KeySwitch.from_value(0x10000)
    with pytest.raises(ValueError):
        KeySwitch.from_value(-1)


def test_button_word_is_little_endian():
    packet = RockerBtnData(btn=KeySwitch(a=True)).pack()
    assert packet[2:4] == b"\x00\x01"


def test_packet_round_trip():
    original = RockerBtnData(
        head=b"\xfe\xef",
        btn=KeySwitch(l2=True, x=True),
        lx=0.5,
        rx=-0.25,
        ry=1.0,
        l2=0.75,
        ly=-1.0,
        idle=bytes(range(16)),
    )
    assert RockerBtnData.unpack(original.pack()) == original


def test_unpack_rejects_wrong_length():
    with pytest.raises(ValueError):
        RockerBtnData.unpack(bytes(39))


def test_pack_rejects_bad_head():
    with pytest.raises(ValueError):
        RockerBtnData(head=b"\x00").pack()