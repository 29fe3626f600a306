"""WSGI config for UniStay project.

Exposes the WSGI application for production WSGI servers, pointing at
our settings package.
"""

import os
from django.core.wsgi import get_wsgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_wsgi_application()
