from types import MappingProxyType

from app.agent.artifacts import SignalSet

# Matching is plain substring search on lowercased text, so "scale" also hits
# "scalextric" and "ai" hits "email".
KEYWORD_GROUPS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "realtime": ("realtime", "real-time", "chat", "socket", "collaboration"),
    "scale": ("millions", "high traffic", "global", "enterprise", "scale"),
    "compliance": ("hipaa", "pci", "gdpr", "soc2", "compliance", "privacy"),
    "offline": ("offline", "sync", "pwa", "edge"),
    "data_heavy": ("analytics", "ml", "ai", "recommendation", "reporting"),
    "payments": ("payments", "billing", "subscription", "checkout"),
    "mobile": ("mobile", "ios", "android"),
    "web": ("web", "browser", "saas", "dashboard"),
    "mvp": ("mvp", "prototype", "hackathon", "quick", "fast"),
    "marketplace": ("marketplace", "multi-tenant", "multi tenant"),
    "streaming": ("stream", "video", "audio", "live"),
    "integration": ("integration", "erp", "crm", "sap", "salesforce"),
})


def _mentions_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def detect_signals(description: str) -> SignalSet:
    """Flag every keyword group that occurs anywhere in `description`."""
    normalized = description.lower()
    return SignalSet(**{
        signal: _mentions_any(normalized, keywords)
        for signal, keywords in KEYWORD_GROUPS.items()
    })
