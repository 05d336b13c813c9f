"""
ASGI config for the medsim project.

Order matters: configure Django before importing any Django-dependent modules.
"""
import os

# 1) Configure settings before any Django import
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "medsim.settings")

# 2) HTTP app (Django); this also runs django.setup()
from django.core.asgi import get_asgi_application  # noqa: E402

application = get_asgi_application()

# 3) Background simulator shares the process with the request handlers
from monitoring.services.simulator import start_background_simulator  # noqa: E402

start_background_simulator()
