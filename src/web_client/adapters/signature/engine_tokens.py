"""Rendering engine sniffing from user-agent product tokens.

Neither user-agent library used here reports the rendering engine, so it is
read from the product tokens browsers put in their user-agent strings.
"""

import re

# Order matters: Edge and Blink browsers also advertise AppleWebKit and Gecko
_ENGINE_RULES: list[tuple[str, re.Pattern[str]]] = [
    ("EdgeHTML", re.compile(r"\bEdge/(?P<version>[\d.]+)")),
    ("Trident", re.compile(r"\bTrident/(?P<version>[\d.]+)")),
    ("Trident", re.compile(r"\bMSIE (?P<version>[\d.]+)")),
    ("Presto", re.compile(r"\bPresto/(?P<version>[\d.]+)")),
    ("Blink", re.compile(r"\bAppleWebKit/[\d.]+.*\bChrome/(?P<version>[\d.]+)")),
    ("Webkit", re.compile(r"\bAppleWebKit/(?P<version>[\d.]+)")),
    ("KHTML", re.compile(r"\bKHTML/(?P<version>[\d.]+)")),
    ("Gecko", re.compile(r"\brv:(?P<version>[\d.]+)\).*\bGecko/")),
    ("Amaya", re.compile(r"\bAmaya/(?P<version>[\d.]+)")),
]


def sniff_engine(user_agent: str) -> tuple[str, str]:
    """Return the (engine label, engine version) of a user agent.

    Returns ``("", "")`` when no known engine token is present.
    """
    for label, pattern in _ENGINE_RULES:
        match = pattern.search(user_agent)
        if match:
            return label, match.group("version")
    return "", ""
