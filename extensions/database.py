# extensions/database.py
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

# Created once per process; bound to the app in create_app() and released
# with the app context.
db = SQLAlchemy()
migrate = Migrate()

__all__ = ["db", "migrate"]
