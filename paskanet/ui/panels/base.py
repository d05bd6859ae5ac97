"""
Panel body base: every tool panel is a QWidget that owns its feed
subscriptions and state machines and stops them in teardown().
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, TypeVar

from PySide6.QtWidgets import QTableWidget, QTableWidgetItem, QWidget

from paskanet.application.ports.metrics import Cancellable

if TYPE_CHECKING:
    from paskanet.application.container import Container

log = logging.getLogger(__name__)


class _Disposable(Protocol):
    def dispose(self) -> None: ...


TCancel = TypeVar("TCancel", bound=Cancellable)
TDispose = TypeVar("TDispose", bound=_Disposable)


class PanelBody(QWidget):
    def __init__(self, container: Container, window_id: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._container = container
        self._window_id = window_id
        self._subscriptions: list[Cancellable] = []
        self._owned: list[_Disposable] = []
        self._torn_down = False

    @property
    def window_id(self) -> int:
        return self._window_id

    @property
    def torn_down(self) -> bool:
        return self._torn_down

    def track(self, subscription: TCancel) -> TCancel:
        self._subscriptions.append(subscription)
        return subscription

    def own(self, machine: TDispose) -> TDispose:
        self._owned.append(machine)
        return machine

    def teardown(self) -> None:
        if self._torn_down:
            return
        self._torn_down = True
        for sub in self._subscriptions:
            sub.cancel()
        for machine in self._owned:
            machine.dispose()
        self._subscriptions.clear()
        self._owned.clear()
        log.debug("Panel of window %d torn down", self._window_id, extra={"window_id": self._window_id})


def make_table(headers: list[str], parent: QWidget | None = None, *, selectable: bool = False) -> QTableWidget:
    table = QTableWidget(0, len(headers), parent)
    table.setHorizontalHeaderLabels(headers)
    table.verticalHeader().setVisible(False)
    table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
    table.horizontalHeader().setStretchLastSection(True)
    if selectable:
        table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        table.setSelectionMode(QTableWidget.SelectionMode.SingleSelection)
    else:
        table.setSelectionMode(QTableWidget.SelectionMode.NoSelection)
    return table


def fill_row(table: QTableWidget, row: int, values: list[object]) -> None:
    for col, value in enumerate(values):
        item = table.item(row, col)
        if item is None:
            table.setItem(row, col, QTableWidgetItem(str(value)))
        else:
            item.setText(str(value))
