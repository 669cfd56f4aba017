# expense_backend/__main__.py
from .app import create_app

create_app().run(port=3019)
