"""
ユーザー管理モジュール（一覧と新規登録のみ。更新・削除 API はない）。
"""

from .schemas import User, UserRegisterRequest, UserRegisterResponse  # noqa: F401
from .service import UserService  # noqa: F401
