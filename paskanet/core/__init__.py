"""Framework-free primitives shared by every layer: errors, events, logging, paths."""
