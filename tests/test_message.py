import pytest

from cyclesearch.message import Message, MessageType


def test_forward_fields():
    msg = Message.forward(1, 2, 30, 40, 5)
    assert msg.kind is MessageType.FORWARD
    assert (msg.source, msg.target, msg.r, msg.gx, msg.l) == (1, 2, 30, 40, 5)
    assert msg.path == ()
    assert msg.type_name() == "forward"


def test_backward_fields():
    msg = Message.backward(3, 4, 11, 12)
    assert msg.kind is MessageType.BACKWARD
    assert (msg.source, msg.target, msg.r, msg.gx, msg.l) == (3, 4, 11, 12, 0)
    assert msg.type_name() == "backward"


def test_publish_copies_path():
    path = [7, 8]
    msg = Message.publish(1, 2, 3, 4, path)
    path.append(9)
    assert msg.path == (7, 8)
    assert msg.kind is MessageType.PUBLISH
    assert msg.type_name() == "publish"


def test_broadcast_fields():
    msg = Message.broadcast([0, 1, 2, 0])
    assert msg.kind is MessageType.BROADCAST
    assert msg.path == (0, 1, 2, 0)
    assert (msg.source, msg.target) == (0, 0)
    assert msg.type_name() == "broadcast"


def test_type_values_are_ordered():
    messages = [
        Message.forward(0, 1, 2, 3, 4),
        Message.backward(0, 1, 2, 3),
        Message.publish(0, 1, 2, 3, [0]),
        Message.broadcast([0, 1]),
    ]
    assert [msg.kind.value for msg in messages] == [0, 1, 2, 3]


@pytest.mark.parametrize("path", [[0, 1, 2, 0], [5], [10, 20]])
def test_path_key_round_trip(path):
    msg = Message.broadcast(path)
    assert [int(part) for part in msg.path_key().split(" ")] == path


def test_path_key_empty():
    assert Message.forward(0, 1, 2, 3, 4).path_key() == ""


def test_describe_forward():
    msg = Message.forward(1, 12, 5, 7, 2)
    assert msg.describe() == "[01->12] (t=f, r=5, gx=7, l=2)"


def test_describe_backward_pads_like_forward():
    fwd = Message.forward(3, 4, 9, 8, 1).describe()
    bwd = Message.backward(3, 4, 9, 8).describe()
    assert bwd.startswith("[03->04] (t=b,")
    assert fwd[:9] == bwd[:9]
    assert bwd.endswith("r=9, gx=8)")


def test_describe_publish_and_broadcast():
    pub = Message.publish(10, 2, 6, 1, [4, 5])
    assert pub.describe() == "[10->02] (t=p, r=6, path={ 4 5 })"
    brd = Message.broadcast([1, 2])
    assert brd.describe() == "[BRDC] (path={ 1 2 })"


def test_messages_are_immutable_and_comparable():
    a = Message.forward(1, 2, 3, 4, 5)
    b = Message.forward(1, 2, 3, 4, 5)
    assert a == b
    assert hash(a) == hash(b)
    with pytest.raises(AttributeError):
        a.r = 10