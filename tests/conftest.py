import pytest

from rpian.terminal.context import TerminalContext, set_terminal
from rpian.terminal.errors import NullErrorHandler, set_error_handler
from rpian.terminal.viewport import Viewport, clear_viewport

from .virtual_terminal import RecordingErrorHandler, VirtualTerminal


@pytest.fixture(autouse=True)
def _reset_globals():
    """Leave the process-wide terminal, viewport and handler as we found them."""
    previous_terminal = set_terminal(VirtualTerminal())
    previous_handler = set_error_handler(NullErrorHandler())
    clear_viewport()
    yield
    set_terminal(previous_terminal)
    set_error_handler(previous_handler)
    clear_viewport()


@pytest.fixture
def term():
    return VirtualTerminal()


@pytest.fixture
def handler():
    return RecordingErrorHandler()


@pytest.fixture
def ctx(term, handler):
    """An explicit 80x24 context writing to ``term`` and reporting to ``handler``."""
    return TerminalContext(terminal=term, viewport=Viewport(80, 24), error_handler=handler)
