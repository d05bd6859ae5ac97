from __future__ import annotations

from paskanet.application.ports.scheduler import ManualScheduler
from paskanet.services.mock_data import DriveRow, ServiceRow
from paskanet.services.tools import CleanupStep, DiskCleanup, DriveOptimizer, ServiceControl

SERVICES = (
    ServiceRow("Print Spooler", "Running", "Manages all print jobs."),
    ServiceRow("DHCP Client", "Stopped", "Manages network configuration."),
)


def test_service_buttons_follow_status() -> None:
    control = ServiceControl(SERVICES, ManualScheduler())
    assert not control.can_restart()

    control.select("Print Spooler")
    assert (control.can_start(), control.can_stop(), control.can_restart()) == (False, True, True)

    control.select("DHCP Client")
    assert (control.can_start(), control.can_stop()) == (True, False)


def test_service_start_and_stop() -> None:
    control = ServiceControl(SERVICES, ManualScheduler())
    control.select("DHCP Client")

    control.start()
    assert control.selected.status == "Running"
    control.stop()
    assert control.selected.status == "Stopped"


def test_service_restart_comes_back_after_delay() -> None:
    scheduler = ManualScheduler()
    control = ServiceControl(SERVICES, scheduler)
    changes: list[str] = []
    control.on_change = lambda: changes.append(control.selected.status)
    control.select("Print Spooler")

    control.restart()
    assert control.selected.status == "Stopped"
    scheduler.advance(500)

    assert control.selected.status == "Running"
    assert changes[-2:] == ["Stopped", "Running"]


def test_disposed_service_control_ignores_pending_restart() -> None:
    scheduler = ManualScheduler()
    control = ServiceControl(SERVICES, scheduler)
    control.select("Print Spooler")
    control.restart()

    control.dispose()
    scheduler.advance(500)

    assert control.selected.status == "Stopped"


def test_selecting_unknown_service_is_ignored() -> None:
    control = ServiceControl(SERVICES, ManualScheduler())

    control.select("Nope")

    assert control.selected is None


def test_disk_cleanup_walks_through_all_steps() -> None:
    scheduler = ManualScheduler()
    cleanup = DiskCleanup(scheduler)
    assert cleanup.step is CleanupStep.INITIAL

    cleanup.clean()  # not allowed before results
    assert cleanup.step is CleanupStep.INITIAL

    cleanup.scan()
    assert cleanup.step is CleanupStep.SCANNING
    scheduler.advance(1000)
    assert cleanup.progress == 50
    scheduler.advance(1000)
    assert cleanup.progress == 100
    assert cleanup.step is CleanupStep.SCANNING
    scheduler.advance(100)
    assert cleanup.step is CleanupStep.RESULTS

    cleanup.clean()
    assert cleanup.step is CleanupStep.CLEANING
    assert cleanup.progress == 0
    scheduler.advance(2100)
    assert cleanup.step is CleanupStep.COMPLETE
    assert scheduler.pending == 0


def test_disposed_cleanup_stops_ticking() -> None:
    scheduler = ManualScheduler()
    cleanup = DiskCleanup(scheduler)
    cleanup.scan()
    scheduler.advance(300)

    cleanup.dispose()
    scheduler.advance(5000)

    assert cleanup.progress == 15
    assert scheduler.pending == 0


def test_drive_optimizer() -> None:
    scheduler = ManualScheduler()
    drives = (
        DriveRow("(C:)", "Solid state drive", "OK"),
        DriveRow("(D:) Recovery", "Hard disk drive", "Needs optimization"),
    )
    optimizer = DriveOptimizer(drives, scheduler)
    assert optimizer.can_optimize()

    optimizer.optimize()
    assert optimizer.optimizing
    assert not optimizer.can_optimize()
    assert [optimizer.status_text(d) for d in optimizer.drives] == ["OK", "Optimizing..."]

    scheduler.advance(2999)
    assert optimizer.optimizing
    scheduler.advance(1)

    assert not optimizer.optimizing
    assert all(d.status == "OK" for d in optimizer.drives)
    assert not optimizer.can_optimize()
