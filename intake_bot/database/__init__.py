from .db import SubmissionStore, get_db

__all__ = ["SubmissionStore", "get_db"]
