from flask import Blueprint

# Create the versioned blueprint
v1_bp = Blueprint("v1", __name__)

# Import route modules so they register with v1_bp
from . import health
from . import auth
from . import dashboard
from . import projects
from . import blog
from . import snippets
from . import services
from . import service_areas
from . import submissions
from . import settings
from . import uploads
from . import editor
