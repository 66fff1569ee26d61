import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QEvent  # noqa: E402
from PySide6.QtWidgets import QApplication, QDialog, QWidget  # noqa: E402

from quicklaunch import main_window  # noqa: E402
from quicklaunch.events import EventBus  # noqa: E402
from quicklaunch.main_window import PaletteWindow, highlighted_name  # noqa: E402
from quicklaunch.pins import PinStore  # noqa: E402
from quicklaunch.ranking import Catalog  # noqa: E402
from quicklaunch.session import Session  # noqa: E402
from quicklaunch.settings import SettingsStore  # noqa: E402

from .conftest import FakeLauncher, ManualTimers  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def palette(qapp, corpus, kv):
    settings = SettingsStore(kv)
    window = PaletteWindow(settings)
    launcher = FakeLauncher()
    timers = ManualTimers()
    session = Session(
        catalog=Catalog(corpus),
        pins=PinStore(kv),
        settings=settings,
        launcher=launcher,
        window=window,
        start_timer=timers,
    )
    session.attach(EventBus())
    window.bind(session)
    yield window, session, launcher, timers
    session.close()
    window.quitting = True
    window.close()
    window.deleteLater()


def _deactivate(window, monkeypatch, active):
    monkeypatch.setattr(window, "isActiveWindow", lambda: False)
    monkeypatch.setattr(main_window.QApplication, "activeWindow", staticmethod(lambda: active))
    window.changeEvent(QEvent(QEvent.ActivationChange))


def test_own_dialog_taking_focus_does_not_hide_palette(palette, monkeypatch):
    window, session, launcher, timers = palette
    dialog = QDialog(window)
    _deactivate(window, monkeypatch, dialog)
    assert not session.hide_pending
    timers.advance(150)
    assert launcher.hide_calls == 0


def test_other_window_taking_focus_hides_palette(palette, monkeypatch):
    window, session, launcher, timers = palette
    stranger = QWidget()
    _deactivate(window, monkeypatch, stranger)
    assert session.hide_pending
    timers.advance(150)
    assert launcher.hide_calls == 1


def test_focus_lost_to_another_application_hides_palette(palette, monkeypatch):
    window, session, launcher, timers = palette
    _deactivate(window, monkeypatch, None)
    timers.advance(150)
    assert launcher.hide_calls == 1


def test_empty_search_shows_no_results_notice(palette):
    window, session, *_ = palette
    session.set_query("zzzzqqq")
    assert window.results.isHidden()
    assert not window.results_empty.isHidden()
    assert "zzzzqqq" in window.results_empty.text()


def test_results_highlight_the_matched_text(palette):
    window, session, *_ = palette
    session.set_query("chro")
    assert window.results_empty.isHidden()
    label = window.results.itemWidget(window.results.item(0))
    assert ">Chro</b>" in label.text()


def test_highlighted_name_escapes_markup():
    assert highlighted_name("<Tool>", "zzz") == "&lt;Tool&gt;"
    assert highlighted_name("A&B", "&") == 'A<b style="color: #FFB900;">&amp;</b>B'
