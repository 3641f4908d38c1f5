import os

from django.core.wsgi import get_wsgi_application

# Set default Django settings module for the WSGI server
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'SevaKeyBackend.settings')

application = get_wsgi_application()
