import pytest

from debounced import utils


def test_check_operation():
    assert utils.check_operation(print) is print

    with pytest.raises(TypeError, match="operation must be callable"):
        utils.check_operation(None)

    with pytest.raises(TypeError, match="fetch must be callable"):
        utils.check_operation("http://example.org", "fetch")


def test_check_wait():
    assert utils.check_wait(0) == 0
    assert utils.check_wait(400) == 400
    assert utils.check_wait(12.5) == 12.5

    with pytest.raises(ValueError):
        utils.check_wait(-1)
    with pytest.raises(ValueError):
        utils.check_wait(float("inf"))
    with pytest.raises(ValueError):
        utils.check_wait(float("nan"))

    with pytest.raises(TypeError):
        utils.check_wait("400")
    with pytest.raises(TypeError):
        utils.check_wait(None)
    with pytest.raises(TypeError):
        utils.check_wait(True)


def test_to_seconds():
    assert utils.to_seconds(400) == 0.4
    assert utils.to_seconds(0) == 0


def test_describe():
    def lookup():
        pass

    assert utils.describe(lookup).endswith("lookup")
