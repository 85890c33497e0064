import fcntl
import os
import select
import termios

import pytest

from asciicraft.terminal import RawTerminal


@pytest.fixture
def pty_pair():
    master, slave = os.openpty()
    yield master, slave
    os.close(master)
    os.close(slave)


def _wait_readable(fd):
    ready, _, _ = select.select([fd], [], [], 2.0)
    return ready


def test_enter_clears_echo_and_canonical(pty_pair):
    _, slave = pty_pair
    with RawTerminal(slave):
        lflag = termios.tcgetattr(slave)[3]
        assert lflag & termios.ECHO == 0
        assert lflag & termios.ICANON == 0
        assert fcntl.fcntl(slave, fcntl.F_GETFL) & os.O_NONBLOCK


def test_exit_restores_settings(pty_pair):
    _, slave = pty_pair
    before_attrs = termios.tcgetattr(slave)
    before_flags = fcntl.fcntl(slave, fcntl.F_GETFL)
    with RawTerminal(slave):
        pass
    assert termios.tcgetattr(slave) == before_attrs
    assert fcntl.fcntl(slave, fcntl.F_GETFL) == before_flags


def test_read_keys_collects_pressed_keys(pty_pair):
    master, slave = pty_pair
    with RawTerminal(slave) as term:
        os.write(master, b"wiiw")
        assert _wait_readable(slave)
        assert term.read_keys() == frozenset({"w", "i"})
        assert term.read_keys() == frozenset()


def test_read_keys_when_nothing_pending(pty_pair):
    _, slave = pty_pair
    with RawTerminal(slave) as term:
        assert term.read_keys() == frozenset()


def test_read_keys_requires_entering(pty_pair):
    _, slave = pty_pair
    with pytest.raises(RuntimeError):
        RawTerminal(slave).read_keys()


def test_enter_on_non_terminal_fails():
    read_end, write_end = os.pipe()
    try:
        with pytest.raises(termios.error):
            with RawTerminal(read_end):
                pass
    finally:
        os.close(read_end)
        os.close(write_end)