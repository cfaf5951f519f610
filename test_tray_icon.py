from datetime import date

import pytest

from icon_gen import create_icon_image

try:
    import tray_icon
except Exception as e:  # pystray picks a desktop backend on import
    pytest.skip(f"pystray backend unavailable: {e}", allow_module_level=True)


@pytest.fixture
def built(monkeypatch):
    captured = {}

    def fake_icon(name, image, title, menu):
        captured.update(name=name, image=image, title=title, menu=menu)
        return captured

    monkeypatch.setattr(tray_icon.pystray, "Icon", fake_icon)
    return captured


def _item(menu, text):
    return next(item for item in menu.items if item.text == text)


def test_menu_with_today_item(built):
    calls = []
    tray_icon.create_tray(
        create_icon_image(date(2024, 2, 9)),
        on_show=lambda: calls.append("show"),
        on_exit=lambda: calls.append("exit"),
        on_today=lambda: calls.append("today"),
    )
    assert built["name"] == "month-calendar"
    texts = [item.text for item in built["menu"].items]
    assert texts[0] == "Show Calendar"
    assert "Go to Today" in texts
    assert texts[-1] == "Exit"

    _item(built["menu"], "Go to Today")(None)
    _item(built["menu"], "Exit")(None)
    assert calls == ["today", "exit"]


def test_menu_without_today_item(built):
    tray_icon.create_tray(create_icon_image(), lambda: None, lambda: None)
    texts = [item.text for item in built["menu"].items]
    assert "Go to Today" not in texts
