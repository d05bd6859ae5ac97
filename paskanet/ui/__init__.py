"""PySide6 rendering of the shell: screens, window frames, tool panels."""
