"""Application layer.

Composition root for one running shell plus the ports the UI implements.

Rule of thumb:
UI -> application.container -> wm / terminal / services
"""
