from .auth import auth_bp
from .engineers import engineers_bp
from .projects import projects_bp
from .assignments import assignments_bp
from .utils import utils_bp

__all__ = [
    'auth_bp', 'engineers_bp', 'projects_bp', 'assignments_bp', 'utils_bp'
]
