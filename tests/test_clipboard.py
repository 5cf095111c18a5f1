import pytest

tkinter = pytest.importorskip("tkinter")

from gui.clipboard import FEEDBACK_MS, ClipboardGuard, flash_button


class FakeRoot:
    """Just enough of the Tk clipboard and `after` API, no display needed."""

    def __init__(self, fail=False):
        self.contents = None
        self.jobs = {}
        self.fail = fail
        self._next = 0

    def clipboard_clear(self):
        if self.fail:
            raise tkinter.TclError("clipboard unavailable")
        self.contents = ""

    def clipboard_append(self, text):
        self.contents += text

    def update(self):
        pass

    def after(self, ms, callback):
        self._next += 1
        job = f"after#{self._next}"
        self.jobs[job] = (ms, callback)
        return job

    def after_cancel(self, job):
        del self.jobs[job]

    def run_pending(self):
        jobs, self.jobs = self.jobs, {}
        for _, callback in jobs.values():
            callback()


class FakeButton:
    def __init__(self, root):
        self.root = root
        self.options = {}
        self.exists = True

    def configure(self, **kwargs):
        assert self.exists, "configured a destroyed button"
        self.options.update(kwargs)

    def winfo_exists(self):
        return int(self.exists)

    def winfo_toplevel(self):
        return self.root


def test_copy_schedules_wipe():
    root = FakeRoot()
    guard = ClipboardGuard(root, clear_seconds=15)
    guard.copy("s3cret!")

    assert root.contents == "s3cret!"
    assert guard.pending
    [(ms, _)] = root.jobs.values()
    assert ms == 15000


def test_wipe_clears_clipboard_and_notifies():
    root = FakeRoot()
    guard = ClipboardGuard(root, clear_seconds=15)
    cleared = []
    guard.on_cleared = lambda: cleared.append(True)

    guard.copy("s3cret!")
    root.run_pending()

    assert root.contents == ""
    assert not guard.pending
    assert cleared == [True]


def test_second_copy_restarts_timer():
    root = FakeRoot()
    guard = ClipboardGuard(root, clear_seconds=15)
    guard.copy("first")
    guard.copy("second")
    assert len(root.jobs) == 1
    assert root.contents == "second"


def test_zero_delay_never_wipes():
    root = FakeRoot()
    guard = ClipboardGuard(root, clear_seconds=0)
    guard.copy("keep me")
    assert not guard.pending
    assert root.jobs == {}


def test_wipe_now_only_when_pending():
    root = FakeRoot()
    guard = ClipboardGuard(root, clear_seconds=0)
    guard.copy("keep me")
    guard.wipe_now()
    assert root.contents == "keep me"

    guard.clear_seconds = 15
    guard.copy("s3cret!")
    guard.wipe_now()
    assert root.contents == ""
    assert root.jobs == {}


def test_copy_failure_propagates():
    guard = ClipboardGuard(FakeRoot(fail=True), clear_seconds=15)
    with pytest.raises(tkinter.TclError):
        guard.copy("s3cret!")
    assert not guard.pending


def test_failed_wipe_is_logged(caplog):
    root = FakeRoot()
    guard = ClipboardGuard(root, clear_seconds=15)
    guard.copy("s3cret!")
    root.fail = True
    root.run_pending()
    assert "Clearing clipboard failed" in caplog.text
    assert not guard.pending


def test_view_rebuild_keeps_pending_wipe():
    pytest.importorskip("customtkinter")
    from gui.main_window import SHORTCUTS, MainWindow

    class OldView:
        # The bits of a MainWindow that detach() touches
        def __init__(self, root, guard):
            self.root = root
            self.clipboard_guard = guard
            guard.on_cleared = self._on_clipboard_cleared
            self.unbound = []

        def _on_clipboard_cleared(self):
            raise AssertionError("old view notified after rebuild")

        def winfo_toplevel(self):
            return self

        def unbind(self, sequence):
            self.unbound.append(sequence)

    root = FakeRoot()
    guard = ClipboardGuard(root, clear_seconds=15)
    old = OldView(root, guard)
    guard.copy("s3cret!")

    MainWindow.detach(old)

    assert root.contents == "s3cret!"
    assert guard.pending
    assert old.unbound == list(SHORTCUTS)

    root.run_pending()
    assert root.contents == ""


def test_flash_button_resets_after_delay():
    root = FakeRoot()
    btn = FakeButton(root)
    flash_button(btn, "✓", "#0f0", "Copy", "#00f")
    assert btn.options == {"text": "✓", "fg_color": "#0f0"}

    [(ms, _)] = root.jobs.values()
    assert ms == FEEDBACK_MS
    root.run_pending()
    assert btn.options == {"text": "Copy", "fg_color": "#00f"}


def test_flash_button_skips_destroyed_button():
    root = FakeRoot()
    btn = FakeButton(root)
    flash_button(btn, "✓", "#0f0", "Copy", "#00f")
    btn.exists = False
    root.run_pending()
    assert btn.options["text"] == "✓"
