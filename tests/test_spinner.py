import io
import time

import pytest

from mplkit.spinner import ALT_TICKS, TICKS, Spinner, create_alt_spinner, create_spinner


def _spinner(stream, **kwargs):
    return Spinner(TICKS, interval=0.5, message="Working", stream=stream, enabled=True, **kwargs)


def test_create_spinner_runs_with_message():
    spinner = create_spinner("Getting accounts...")
    try:
        assert spinner.message == "Getting accounts..."
        assert spinner.tick_strings == TICKS
        assert spinner.interval == 0.01
        assert spinner.is_running
    finally:
        spinner.finish()
    assert not spinner.is_running
    assert spinner.is_finished
    assert spinner.frame == TICKS[-1]


def test_create_alt_spinner():
    spinner = create_alt_spinner("Sending network requests....")
    try:
        assert spinner.tick_strings == ALT_TICKS
        assert spinner.interval == 0.08
        assert spinner.separator == " "
        assert spinner.message == "Sending network requests...."
    finally:
        spinner.finish()
    assert spinner.frame == "[=   ]"


def test_start_draws_first_frame():
    stream = io.StringIO()
    spinner = _spinner(stream).start()
    spinner.finish_and_clear()
    assert stream.getvalue().startswith("\r\x1b[2K\x1b[34m" + TICKS[0] + "\x1b[0mWorking")


def test_finish_with_message_leaves_line():
    stream = io.StringIO()
    spinner = _spinner(stream).start()
    spinner.finish_with_message("Getting accounts...Done!")
    assert spinner.message == "Getting accounts...Done!"
    assert stream.getvalue().endswith("Getting accounts...Done!\n")


def test_finish_and_clear_erases_line():
    stream = io.StringIO()
    spinner = _spinner(stream).start()
    spinner.finish_and_clear()
    assert stream.getvalue().endswith("\r\x1b[2K")
    assert not spinner.is_running


def test_set_message_redraws():
    stream = io.StringIO()
    spinner = _spinner(stream).start()
    spinner.set_message("Awaiting results....")
    spinner.finish_and_clear()
    assert "Awaiting results...." in stream.getvalue()
    assert spinner.message == "Awaiting results...."


def test_spinner_ticks_over_time():
    stream = io.StringIO()
    spinner = Spinner(TICKS, interval=0.001, stream=stream, enabled=True).start()
    deadline = time.monotonic() + 2
    while TICKS[1] not in stream.getvalue() and time.monotonic() < deadline:
        time.sleep(0.005)
    spinner.finish()
    assert TICKS[1] in stream.getvalue()


def test_disabled_spinner_writes_nothing():
    stream = io.StringIO()
    spinner = Spinner(TICKS, stream=stream, enabled=False).start()
    spinner.finish_with_message("done")
    assert stream.getvalue() == ""
    assert spinner.message == "done"


def test_finish_twice_writes_once():
    stream = io.StringIO()
    spinner = _spinner(stream).start()
    spinner.finish()
    written = stream.getvalue()
    spinner.finish()
    spinner.finish_and_clear()
    assert stream.getvalue() == written


def test_restart_after_finish_raises():
    spinner = _spinner(io.StringIO()).start()
    spinner.finish()
    with pytest.raises(RuntimeError):
        spinner.start()


def test_double_start_raises():
    spinner = _spinner(io.StringIO()).start()
    try:
        with pytest.raises(RuntimeError):
            spinner.start()
    finally:
        spinner.finish()


def test_empty_ticks_rejected():
    with pytest.raises(ValueError):
        Spinner([])


def test_context_manager_clears():
    stream = io.StringIO()
    with _spinner(stream) as spinner:
        assert spinner.is_running
    assert spinner.is_finished
    assert stream.getvalue().endswith("\r\x1b[2K")