"""Tests for the Indent tracker."""

import threading

from unilog.debug import Indent


def test_indent_push():
    # indent shall be 0 by default
    assert Indent.get_indent() == 0
    Indent.push()
    assert Indent.get_indent() == 2


def test_indent_pop():
    test_indent_push()
    Indent.pop()
    assert Indent.get_indent() == 0


def test_indent_reset():
    Indent.push()
    Indent.push()
    Indent.reset()
    assert Indent.get_indent() == 0


def test_unpaired_pop_goes_negative():
    """Test pop() is not guarded; pairing is the caller's job."""
    Indent.pop()
    assert Indent.get_indent() == -2


def test_indent_is_per_thread():
    """Test a push in one thread is invisible to another."""
    seen = []

    def worker() -> None:
        seen.append(Indent.get_indent())
        Indent.push()
        Indent.push()
        seen.append(Indent.get_indent())

    Indent.push()
    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()

    assert seen == [0, 4]
    assert Indent.get_indent() == 2
