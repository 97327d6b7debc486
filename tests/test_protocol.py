import signal

import pytest

from minitalk.protocol import Receiver, Reply, encode_char, frame_message

U1 = signal.SIGUSR1
U2 = signal.SIGUSR2


def feed(receiver, signals):
    results = [receiver.handle(sig) for sig in signals]
    return results


def test_reply_signals_fixed_by_protocol():
    replies, message = Receiver().handle(U2)
    assert message == b""
    assert [reply.value for reply in replies] == [signal.SIGUSR2, signal.SIGUSR1]
    assert replies == [Reply.ACK, Reply.DONE]


def test_encode_char_least_significant_bit_first():
    assert encode_char(ord("A")) == [U1, U2, U2, U2, U2, U2, U1, U2]


def test_encode_char_zero_is_all_zero_bits():
    assert encode_char(0) == [U2] * 8


@pytest.mark.parametrize("value", [-1, 256, 1000])
def test_encode_char_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        encode_char(value)


def test_encode_char_rejects_non_int():
    with pytest.raises(TypeError):
        encode_char("a")


def test_frame_empty_message():
    assert frame_message(b"") == [U2] + [U2] * 8


def test_frame_starts_with_length_units():
    data = b"hello"
    frame = frame_message(data)
    assert frame[: len(data)] == [U1] * len(data)
    assert frame[len(data)] == U2
    assert len(frame) == len(data) + 1 + 8 * (len(data) + 1)


def test_frame_str_uses_utf8():
    assert frame_message("héllo") == frame_message("héllo".encode("utf-8"))


def test_frame_rejects_other_types():
    with pytest.raises(TypeError):
        frame_message(42)


@pytest.mark.parametrize("message", [b"a", b"hello world", bytes(range(1, 256)), "grüße".encode()])
def test_round_trip(message):
    receiver = Receiver()
    frame = frame_message(message)
    results = feed(receiver, frame[:-7])
    replies, received = results[-1]
    assert received == message
    assert replies == [Reply.DONE]
    assert all(r == ([Reply.ACK], None) for r in results[:-1])


def test_empty_message_completes_at_once():
    receiver = Receiver()
    replies, message = receiver.handle(U2)
    assert replies == [Reply.ACK, Reply.DONE]
    assert message == b""


def test_receiver_can_take_several_messages():
    receiver = Receiver()
    got = []
    for message in (b"first", b"second"):
        for replies, received in feed(receiver, frame_message(message)[:-7]):
            if received is not None:
                got.append(received)
    assert got == [b"first", b"second"]


def test_reset_drops_partial_message():
    receiver = Receiver()
    feed(receiver, frame_message(b"abc")[:10])
    receiver.reset()
    replies, message = receiver.handle(U2)
    assert message == b""
    assert replies[-1] is Reply.DONE


def test_rejects_foreign_signal():
    with pytest.raises(ValueError):
        Receiver().handle(signal.SIGINT)