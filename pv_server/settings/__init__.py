"""
Settings package for pv_server.

Select an environment with DJANGO_SETTINGS_MODULE, e.g.
``pv_server.settings.development`` or ``pv_server.settings.production``.
"""
