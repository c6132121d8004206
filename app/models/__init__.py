"""
Package app.models - modèles SQLAlchemy
"""

from .member import Role, Member, Task, Holiday

__all__ = ["Role", "Member", "Task", "Holiday"]
