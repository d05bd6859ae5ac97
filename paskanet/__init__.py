"""Paskanet II desktop shell simulator."""
