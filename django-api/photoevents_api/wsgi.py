"""WSGI entrypoint. Each request is served by its own worker thread/process."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "photoevents_api.settings")

application = get_wsgi_application()
