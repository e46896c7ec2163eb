import pytest

from cloudless.mbus.acknowledgement import Acknowledgement, AcknowledgementError


def test_fresh_acknowledgement_is_unsettled():
    ack = Acknowledgement()
    assert ack.is_ack() is False
    assert ack.is_nack() is False
    assert ack.error is None


def test_ack_sets_ack_state():
    ack = Acknowledgement()
    ack.ack()
    assert ack.is_ack() is True
    assert ack.is_nack() is False


def test_nack_sets_nack_state():
    ack = Acknowledgement()
    ack.nack()
    assert ack.is_nack() is True
    assert ack.is_ack() is False


@pytest.mark.parametrize(
    "first, second",
    [("ack", "ack"), ("ack", "nack"), ("nack", "ack"), ("nack", "nack")],
)
def test_second_settlement_raises(first, second):
    ack = Acknowledgement()
    getattr(ack, first)()
    with pytest.raises(AcknowledgementError, match="already acknowledged"):
        getattr(ack, second)()
    assert ack.is_ack() is (first == "ack")


def test_error_is_kept():
    problem = ValueError("boom")
    ack = Acknowledgement(error=problem)
    ack.nack()
    assert ack.error is problem
    assert ack.is_nack()