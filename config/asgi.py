"""ASGI config for UniStay project.

The catalog endpoints read listings through Django's async ORM, so the
project can be served by an ASGI server as well as WSGI.
"""

import os
from django.core.asgi import get_asgi_application  # type: ignore

# Use the development settings by default. Production servers should set
# DJANGO_SETTINGS_MODULE accordingly.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_asgi_application()
