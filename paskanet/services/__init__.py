"""Data behind the tool panels: mock tables, metric streams, tool-side state machines."""
