"""
Masquage des données personnelles (email, téléphone, nom, account_id).

Aucune de ces fonctions ne lève d'exception: une entrée invalide donne une
chaîne vide ou la valeur d'origine.
"""

import re
from typing import Any, Mapping

_HANGUL_NAME = re.compile(r"[가-힣]{2,4}")
_NON_DIGIT = re.compile(r"\D", re.ASCII)


def mask_email(email: str) -> str:
    """'user@example.com' -> 'us***@example.com'"""
    if not email or not isinstance(email, str):
        return ""
    local_part, _, domain = email.partition("@")
    if not local_part or not domain:
        return email
    visible = min(2, len(local_part) // 2)
    return f"{local_part[:visible]}***@{domain}"


def mask_phone_number(phone: str) -> str:
    """'010-1234-5678' -> '010-****-5678'; autres formats inchangés."""
    if not phone or not isinstance(phone, str):
        return ""
    numbers = _NON_DIGIT.sub("", phone)
    if len(numbers) == 11:
        return f"{numbers[:3]}-****-{numbers[7:]}"
    if len(numbers) == 10:
        # 02-1234-5678
        return f"{numbers[:2]}-****-{numbers[6:]}"
    return phone


def mask_name(name: str) -> str:
    """'홍길동' -> '홍*동', 'John Doe' -> 'J*** D***'"""
    if not name or not isinstance(name, str):
        return ""
    if _HANGUL_NAME.fullmatch(name):
        if len(name) == 2:
            return name[0] + "*"
        return name[0] + "*" * (len(name) - 2) + name[-1]
    # Les parties vides (espaces multiples) sont conservées telles quelles
    return " ".join(part[0] + "***" if part else part for part in name.split(" "))


def mask_account_id(account_id: str) -> str:
    """'user1234' -> 'us***'"""
    if not account_id or not isinstance(account_id, str):
        return ""
    visible = min(2, len(account_id) // 3)
    return account_id[:visible] + "***"


_MASKERS = {
    "email": mask_email,
    "mobile": mask_phone_number,
    "name": mask_name,
    "account_id": mask_account_id,
}


def should_mask_data(current_user_id: Any, target_user_id: Any, is_admin: bool) -> bool:
    # Ni l'admin ni le membre lui-même ne voient leurs données masquées.
    # Les ids sont comparés tels quels: l'appelant normalise les types.
    if is_admin:
        return False
    if current_user_id == target_user_id:
        return False
    return True


def mask_user_info(
    user: Mapping[str, Any],
    current_user_id: Any,
    target_user_id: Any,
    is_admin: bool = False,
) -> Mapping[str, Any]:
    """Copie superficielle de `user` avec les champs sensibles masqués.

    Retourne `user` tel quel si le masquage ne s'applique pas. Les clés
    absentes restent absentes et les valeurs vides ne sont pas modifiées.
    """
    if not should_mask_data(current_user_id, target_user_id, is_admin):
        return user
    masked = dict(user)
    for field, masker in _MASKERS.items():
        value = masked.get(field)
        if value:
            masked[field] = masker(value)
    return masked
