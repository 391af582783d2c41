import base64
import sys
from unittest import mock

import pytest

from procdeck.clipboard import Provider, copy_with, detect_copy_provider


def _clear_env(monkeypatch):
    for name in ("WAYLAND_DISPLAY", "DISPLAY", "TMUX"):
        monkeypatch.delenv(name, raising=False)


def test_osc52_writes_escape_sequence(capsys):
    copy_with("hello", Provider.osc52())
    out = capsys.readouterr().out
    encoded = base64.standard_b64encode(b"hello").decode("ascii")
    assert out == f"\x1b]52;;{encoded}\x07"


def test_osc52_round_trip_of_unicode(capsys):
    copy_with("héllo ✓", Provider.osc52())
    out = capsys.readouterr().out
    assert out.startswith("\x1b]52;;") and out.endswith("\x07")
    payload = out[len("\x1b]52;;"):-1]
    assert base64.standard_b64decode(payload).decode("utf-8") == "héllo ✓"


def test_noop_writes_nothing(capsys):
    copy_with("hello", Provider.noop())
    assert capsys.readouterr().out == ""


def test_exec_feeds_text_to_program_stdin(tmp_path):
    target = tmp_path / "out.bin"
    script = (
        "import sys; open(sys.argv[1], 'wb').write(sys.stdin.buffer.read())"
    )
    provider = Provider.exec(sys.executable, ["-c", script, str(target)])
    copy_with("copied text", provider)
    assert target.read_bytes() == b"copied text"


def test_exec_missing_program_raises(tmp_path):
    provider = Provider.exec(str(tmp_path / "no-such-program"))
    with pytest.raises(OSError):
        copy_with("x", provider)


def test_provider_validation():
    with pytest.raises(ValueError):
        Provider("bogus")
    with pytest.raises(ValueError):
        Provider(Provider.EXEC)
    with pytest.raises(ValueError):
        Provider(Provider.OSC52, "prog")


def test_detect_falls_back_to_osc52(monkeypatch):
    _clear_env(monkeypatch)
    with mock.patch("sys.platform", "linux"), mock.patch(
        "shutil.which", return_value=None
    ):
        assert detect_copy_provider() == Provider.osc52()


def test_detect_prefers_wayland(monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("WAYLAND_DISPLAY", "wayland-0")
    monkeypatch.setenv("DISPLAY", ":0")
    with mock.patch("sys.platform", "linux"), mock.patch(
        "shutil.which", return_value="/usr/bin/found"
    ):
        assert detect_copy_provider() == Provider.exec(
            "wl-copy", ("--type", "text/plain")
        )


def test_detect_x11_xsel_when_no_xclip(monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("DISPLAY", ":0")

    def which(name):
        return "/usr/bin/xsel" if name == "xsel" else None

    with mock.patch("sys.platform", "linux"), mock.patch(
        "shutil.which", side_effect=which
    ):
        assert detect_copy_provider() == Provider.exec("xsel", ("-i", "-b"))


def test_detect_tmux(monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("TMUX", "/tmp/tmux-1/default,1,0")

    def which(name):
        return "/usr/bin/tmux" if name == "tmux" else None

    with mock.patch("sys.platform", "linux"), mock.patch(
        "shutil.which", side_effect=which
    ):
        assert detect_copy_provider() == Provider.exec("tmux", ("load-buffer", "-"))


def test_detect_macos_pbcopy(monkeypatch):
    _clear_env(monkeypatch)
    with mock.patch("sys.platform", "darwin"), mock.patch(
        "shutil.which", return_value="/usr/bin/pbcopy"
    ):
        assert detect_copy_provider() == Provider.exec("pbcopy")