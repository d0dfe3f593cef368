"""
Variables client insérables dans un bloc Text.
Les jetons {{...}} sont résolus par l'expéditeur, jamais par email_builder.
"""
from typing import List, Optional, Tuple

RESET_PASSWORD_CAMPAIGN = "reset_senha"
RESET_URL_VARIABLE      = "{{url_reset}}"

CLIENT_VARIABLES: List[dict] = [
    {"label": "Nome Completo",   "value": "{{nome_cliente}}"},
    {"label": "Email",           "value": "{{cliente.email}}"},
    {"label": "WhatsApp",        "value": "{{cliente.whatsapp}}"},
    {"label": "Saldo de Pontos", "value": "{{cliente.saldo}}"},
    {"label": "CEP",             "value": "{{cliente.cep}}"},
    {"label": "ID do Cliente",   "value": "{{cliente.id_cliente}}"},
    {"label": "ID da Loja",      "value": "{{cliente.id_loja}}"},
]


def available_variables(campaign_type: Optional[str] = None) -> List[dict]:
    """Les campagnes de reset de mot de passe n'exposent que le nom complet."""
    if campaign_type == RESET_PASSWORD_CAMPAIGN:
        return [v for v in CLIENT_VARIABLES if v["value"] == "{{nome_cliente}}"]
    return list(CLIENT_VARIABLES)


def insert_variable(content: str, variable: str, start: int, end: Optional[int] = None) -> Tuple[str, int]:
    """
    Remplace la sélection [start:end] par la variable.

    Returns:
        (nouveau contenu, position du curseur après la variable)
    """
    start = max(0, min(start, len(content)))
    end = start if end is None else max(start, min(end, len(content)))
    new_content = content[:start] + variable + content[end:]
    return new_content, start + len(variable)
