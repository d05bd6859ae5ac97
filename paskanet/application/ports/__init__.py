from paskanet.application.ports.metrics import Cancellable, MetricFeedPort
from paskanet.application.ports.scheduler import ManualScheduler, Scheduler

__all__ = ["Cancellable", "MetricFeedPort", "ManualScheduler", "Scheduler"]
