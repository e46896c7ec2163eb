import json

import pytest

from cloudless.mbus.acknowledgement import Acknowledgement
from cloudless.mbus.message import Confirmation, Message, Messenger
from cloudless.mbus.resource import Credentials, Resource


def test_payload_none():
    assert Message().payload() is None


def test_payload_int():
    assert Message(data=42).payload() == str(42).encode()


def test_payload_str_and_bytes():
    assert Message(data="hello").payload() == "hello".encode()
    assert Message(data=b"\x00\x01").payload() == b"\x00\x01"


def test_payload_float_has_32_decimals():
    payload = Message(data=0.5).payload().decode()
    whole, fraction = payload.split(".")
    assert float(payload) == 0.5
    assert len(fraction) == 32


def test_payload_bool_is_json():
    assert Message(data=True).payload() == b"true"


def test_payload_structure_is_json():
    data = {"a": 1, "b": [1, 2], "c": "x"}
    assert json.loads(Message(data=data).payload()) == data


def test_payload_unserialisable_raises():
    with pytest.raises(TypeError):
        Message(data={"x": object()}).payload()


def test_add_attribute():
    message = Message()
    message.add_attribute("k", 1)
    message.add_attribute("j", "v")
    assert message.attributes == {"k": 1, "j": "v"}


def test_dict_round_trip():
    resource = Resource(
        name="q", vendor="mem", type="queue", url="mem://q",
        credentials=Credentials(url="mem://secret", key="k1"),
    )
    message = Message(
        id="m1", resource=resource, trace_id="t1",
        attributes={"a": 2}, subject="s", data={"k": [1, 2]},
    )
    encoded = json.dumps(message.to_dict())
    assert Message.from_dict(json.loads(encoded)) == message


def test_dict_empty_message_round_trip():
    message = Message()
    restored = Message.from_dict(message.to_dict())
    assert restored == message
    assert message.to_dict()["Attributes"] is None


def test_confirmation_str():
    assert str(Confirmation(message_id="abc")) == "abc"


def test_messenger_is_abstract():
    with pytest.raises(TypeError):
        Messenger()


def test_messenger_subclass_receives_message():
    class Collector(Messenger):
        def __init__(self):
            self.seen = []

        def on_message(self, message, ack):
            self.seen.append(message.data)
            ack.ack()

    collector = Collector()
    ack = Acknowledgement()
    collector.on_message(Message(data="x"), ack)
    assert collector.seen == ["x"]
    assert ack.is_ack()