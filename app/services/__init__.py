from app.services.auth import AuthService
from app.services.passwords import check_strength, generate_password
from app.services.progress import ProgressService

__all__ = ["AuthService", "ProgressService", "check_strength", "generate_password"]
