"""
Traduction des erreurs d'authentification (messages anglais) en messages coréens pour l'UI.
"""

import logging
import os
from typing import Optional, Union

INVALID_CREDENTIALS = "이메일 또는 비밀번호가 올바르지 않습니다."
EMAIL_NOT_CONFIRMED = "이메일 인증이 완료되지 않았습니다. 이메일을 확인해주세요."
ALREADY_REGISTERED = "이미 가입된 이메일입니다."
PASSWORD_REQUIRED = "유효한 비밀번호를 입력해주세요. (최소 6자 이상)"
PASSWORD_TOO_SHORT = "비밀번호는 최소 6자 이상이어야 합니다."
SESSION_EXPIRED = "세션이 만료되었습니다. 다시 로그인해주세요."
NETWORK_ERROR = "네트워크 연결을 확인해주세요."
TOO_MANY_REQUESTS = "너무 많은 요청이 발생했습니다. 잠시 후 다시 시도해주세요."
UNKNOWN_ERROR = "알 수 없는 오류가 발생했습니다."
GENERIC_LOGIN_ERROR = "로그인 중 오류가 발생했습니다. 다시 시도해주세요."

ERROR_MESSAGE_MAP: dict[str, str] = {
    # Connexion
    "Invalid login credentials": INVALID_CREDENTIALS,
    "Email not confirmed": EMAIL_NOT_CONFIRMED,
    "Invalid email or password": INVALID_CREDENTIALS,
    # Inscription
    "User already registered": ALREADY_REGISTERED,
    "Signup requires a valid password": PASSWORD_REQUIRED,
    "Password should be at least 6 characters": PASSWORD_TOO_SHORT,
    "Unable to validate email address: invalid format": "올바른 이메일 형식이 아닙니다.",
    "Signup disabled": "현재 회원가입이 비활성화되어 있습니다.",
    "Member inactive": "비활성화된 계정입니다. 관리자에게 문의해주세요.",
    # Session
    "Session expired": SESSION_EXPIRED,
    "Invalid session": "유효하지 않은 세션입니다. 다시 로그인해주세요.",
    "No session": "로그인이 필요합니다.",
    "Refresh token not found": SESSION_EXPIRED,
    # Réinitialisation du mot de passe
    "User not found": "해당 이메일로 가입된 계정을 찾을 수 없습니다.",
    "Password reset link expired": "비밀번호 재설정 링크가 만료되었습니다.",
    "New password should be different from the old password": "새 비밀번호는 기존 비밀번호와 달라야 합니다.",
    # Réseau
    "Failed to fetch": NETWORK_ERROR,
    "Network request failed": NETWORK_ERROR,
    "fetch failed": NETWORK_ERROR,
    # Rate limiting
    "Email rate limit exceeded": "이메일 발송 한도를 초과했습니다. 잠시 후 다시 시도해주세요.",
    "Too many requests": TOO_MANY_REQUESTS,
    # Divers
    "Invalid token": "유효하지 않은 토큰입니다.",
    "Token has expired": "토큰이 만료되었습니다.",
    "Invalid recovery token": "유효하지 않은 복구 토큰입니다.",
}

ErrorLike = Union[BaseException, str, None]


def _message_of(error: ErrorLike) -> str:
    if isinstance(error, str):
        return error
    if isinstance(error, BaseException):
        # HTTPException expose le texte dans .detail
        detail = getattr(error, "detail", None)
        if isinstance(detail, str):
            return detail
        return str(error)
    return ""


def _debug_enabled() -> bool:
    return os.getenv("APP_DEBUG", "false").lower() == "true"


def get_auth_error_message(error: ErrorLike) -> str:
    if error is None:
        return UNKNOWN_ERROR

    message = _message_of(error)
    if message in ERROR_MESSAGE_MAP:
        return ERROR_MESSAGE_MAP[message]

    lower = message.lower()

    if "invalid" in lower and any(
        k in lower for k in ("login", "credentials", "email", "password")
    ):
        return INVALID_CREDENTIALS
    if "email" in lower and "confirm" in lower:
        return EMAIL_NOT_CONFIRMED
    if "user" in lower and ("already" in lower or "exist" in lower):
        return ALREADY_REGISTERED
    if "password" in lower:
        if "least" in lower or "minimum" in lower:
            return PASSWORD_TOO_SHORT
        if "required" in lower or "valid" in lower:
            return PASSWORD_REQUIRED
    if "network" in lower or "fetch" in lower or "connection" in lower:
        return NETWORK_ERROR
    if ("session" in lower or "token" in lower) and (
        "expired" in lower or "invalid" in lower
    ):
        return SESSION_EXPIRED
    if "rate" in lower or "too many" in lower:
        return TOO_MANY_REQUESTS

    if _debug_enabled():
        logging.warning("Erreur d'authentification non traduite: %s", message)
        return f"인증 오류: {message}"
    return GENERIC_LOGIN_ERROR


def get_auth_error_suggestion(error: ErrorLike) -> Optional[str]:
    """Suggestion de résolution à afficher sous le message d'erreur, si pertinente."""
    if error is None:
        return None
    lower = _message_of(error).lower()
    if "invalid" in lower and ("login" in lower or "credentials" in lower):
        return "비밀번호를 잊으셨다면 비밀번호 찾기를 이용해주세요."
    if "email" in lower and "confirm" in lower:
        return "이메일을 받지 못하셨다면 스팸 메일함을 확인해주세요."
    if "network" in lower or "fetch" in lower:
        return "인터넷 연결 상태를 확인하고 다시 시도해주세요."
    return None
