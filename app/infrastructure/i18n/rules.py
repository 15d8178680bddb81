"""Module rules used to split a monolithic translation file.

Rule order is part of the contract: a key goes to the first rule with a
matching pattern. Specific modules come first and ``common`` comes last,
since its generic ``"_"`` pattern matches most keys.
"""

from typing import Iterable, List, Sequence

from infrastructure.i18n.models import OTHER_MODULE, ModuleRule

DEFAULT_RULES: Sequence[ModuleRule] = (
    ModuleRule(
        "auth",
        (
            "sign_in",
            "sign_out",
            "sign_up",
            "password",
            "login",
            "logout",
            "session",
            "confirmation",
            "unlock",
            "devise",
        ),
    ),
    ModuleRule(
        "emails",
        ("email_", "mailer", "newsletter", "subject", "greeting"),
    ),
    ModuleRule(
        "forms",
        (
            "form_",
            "field_",
            "placeholder",
            "label_",
            "submit",
            "validation",
            "required",
            "invalid",
            "too_short",
            "too_long",
        ),
    ),
    ModuleRule(
        "navigation",
        ("menu_", "nav_", "breadcrumb", "sidebar", "footer", "header", "link_"),
    ),
    ModuleRule(
        "admin",
        ("admin_", "dashboard", "manage_", "settings_", "permission", "role_"),
    ),
    ModuleRule(
        "flash",
        ("flash_", "notice", "alert", "success", "failure", "error"),
    ),
    ModuleRule(
        "dates",
        ("date", "time", "month", "day_", "_ago", "calendar"),
    ),
    ModuleRule(
        "common",
        (
            "save",
            "cancel",
            "delete",
            "edit",
            "back",
            "confirm",
            "search",
            "loading",
            "yes",
            "no",
            "_",
        ),
    ),
)


def validate_ruleset(ruleset: Iterable[ModuleRule]) -> List[ModuleRule]:
    """Check that a rule set can be used for categorization.

    Args:
        ruleset: Rules in declared order.

    Returns:
        The rules as a list, order unchanged.

    Raises:
        ValueError: If a module name repeats, uses the reserved fallback name,
            or a rule has no usable pattern.
    """
    rules = list(ruleset)
    seen = set()
    for rule in rules:
        if rule.name == OTHER_MODULE:
            raise ValueError(f"Module name '{OTHER_MODULE}' is reserved for unmatched keys")
        if rule.name in seen:
            raise ValueError(f"Duplicate module rule: {rule.name}")
        if not rule.patterns:
            raise ValueError(f"Module rule '{rule.name}' has no patterns")
        if any(not pattern for pattern in rule.patterns):
            raise ValueError(f"Module rule '{rule.name}' has an empty pattern")
        seen.add(rule.name)
    return rules
