"""Dropdown dismissal rules."""

from app.application.search import DismissalController, DismissalEvent


async def test_outside_pointer_down_dismisses() -> None:
    calls: list[str] = []

    async def close() -> None:
        calls.append("closed")

    controller = DismissalController()
    controller.on_outside(close)
    assert await controller.handle(DismissalEvent.pointer_down(inside=False)) is True
    assert calls == ["closed"]


async def test_inside_pointer_down_is_ignored() -> None:
    calls: list[str] = []

    async def close() -> None:
        calls.append("closed")

    controller = DismissalController()
    controller.on_outside(close)
    assert await controller.handle(DismissalEvent.pointer_down(inside=True)) is False
    assert calls == []


def test_only_escape_key_dismisses() -> None:
    assert DismissalController.should_dismiss(DismissalEvent.key_down("Escape"))
    assert not DismissalController.should_dismiss(DismissalEvent.key_down("Enter"))
    assert not DismissalController.should_dismiss(DismissalEvent.key_down("a"))


def test_navigation_dismisses() -> None:
    assert DismissalController.should_dismiss(DismissalEvent.navigation())


async def test_cleared_controller_runs_nothing() -> None:
    calls: list[str] = []

    async def close() -> None:
        calls.append("closed")

    controller = DismissalController()
    controller.on_outside(close)
    controller.clear()
    assert await controller.handle(DismissalEvent.navigation()) is True
    assert calls == []
