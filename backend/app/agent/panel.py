"""
Advisory panel: five fixed personas that each argue for part of the design.

Every persona sees the same signal set and carries the same shared risk list.
Role dispatch is a closed match over `AgentRole`; adding a role without a
matching arm fails loudly instead of producing blank advice.
"""
from typing import NamedTuple, assert_never

from app.agent.artifacts import AgentOpinion, AgentRole, ArchitectureChoice, SignalSet
from app.agent.planner import select_architecture


class Persona(NamedTuple):
    name: str
    role: AgentRole


# Display order is part of the response contract.
AGENT_ROSTER: tuple[Persona, ...] = (
    Persona("Nova", AgentRole.PLATFORM_ARCHITECT),
    Persona("Sage", AgentRole.BACKEND_SPECIALIST),
    Persona("Lyra", AgentRole.FRONTEND_MOBILE_EXPERT),
    Persona("Atlas", AgentRole.DATA_AI_ENGINEER),
    Persona("Cipher", AgentRole.SECURITY_COMPLIANCE),
)

RISK_COMPLIANCE = "Regulatory controls will slow delivery without early compliance planning."
RISK_REALTIME = "Realtime workloads require careful scaling of sockets and event pipelines."


def shared_risks(signals: SignalSet) -> list[str]:
    risks: list[str] = []
    if signals.compliance:
        risks.append(RISK_COMPLIANCE)
    if signals.realtime:
        risks.append(RISK_REALTIME)
    return risks


def focus_for(role: AgentRole) -> str:
    match role:
        case AgentRole.PLATFORM_ARCHITECT:
            return "Focus on system boundaries, deployability, and operational risk."
        case AgentRole.BACKEND_SPECIALIST:
            return "Focus on API ergonomics, latency, and service reliability."
        case AgentRole.FRONTEND_MOBILE_EXPERT:
            return "Focus on client delivery speed and shared UI patterns."
        case AgentRole.DATA_AI_ENGINEER:
            return "Focus on data flows, analytics, and ML readiness."
        case AgentRole.SECURITY_COMPLIANCE:
            return "Focus on identity, secrets, and compliance controls."
        case _:
            assert_never(role)


def recommendation_for(
    role: AgentRole,
    signals: SignalSet,
    architecture: ArchitectureChoice,
) -> str:
    match role:
        case AgentRole.PLATFORM_ARCHITECT:
            if architecture == "microservices":
                return "Adopt event-driven microservices with clear domain ownership."
            return "Use a modular monolith with strict domain boundaries and extraction paths."
        case AgentRole.BACKEND_SPECIALIST:
            if signals.realtime:
                return "Use a Node.js API with WebSocket support and a message broker."
            return "Use a TypeScript API (Express/Fastify) with clean service modules."
        case AgentRole.FRONTEND_MOBILE_EXPERT:
            if signals.mobile:
                return "Share design tokens and API clients between web and mobile apps."
            return "Optimize the web app for SSR + edge caching where possible."
        case AgentRole.DATA_AI_ENGINEER:
            if signals.data_heavy:
                return "Introduce event streams and a warehouse for analytics and ML pipelines."
            return "Keep a single relational datastore with clear reporting replicas."
        case AgentRole.SECURITY_COMPLIANCE:
            if signals.compliance:
                return "Plan for auditing, encryption at rest/in transit, and policy-driven access."
            return "Implement OAuth/OIDC with least-privilege access from day one."
        case _:
            assert_never(role)


def advise(signals: SignalSet) -> list[AgentOpinion]:
    """Collect one opinion per roster entry, in roster order."""
    architecture = select_architecture(signals)
    risks = shared_risks(signals)

    return [
        AgentOpinion(
            name=persona.name,
            role=persona.role,
            focus=focus_for(persona.role),
            recommendation=recommendation_for(persona.role, signals, architecture),
            risks=list(risks),
        )
        for persona in AGENT_ROSTER
    ]
