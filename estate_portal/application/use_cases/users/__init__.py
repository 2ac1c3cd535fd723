# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .login_user import LoginUserUseCase
from .logout_user import LogoutUserUseCase
from .signup_user import SignupUserUseCase

__all__ = ["LoginUserUseCase", "LogoutUserUseCase", "SignupUserUseCase"]
