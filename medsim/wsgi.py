"""
WSGI config for the medsim project.

It exposes the WSGI callable as a module-level variable named ``application``
and starts the background vital simulator for the serving process.
"""
import os

from django.core.wsgi import get_wsgi_application  # type: ignore

# Set the default settings module for the 'django' program.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'medsim.settings')

# Obtain the WSGI application for use by the server
application = get_wsgi_application()

from monitoring.services.simulator import start_background_simulator  # noqa: E402

start_background_simulator()
