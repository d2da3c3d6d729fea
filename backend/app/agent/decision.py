from app.agent.artifacts import Decision, SignalSet
from app.agent.planner import plan_components, select_architecture

RATIONALE_MICROSERVICES = (
    "Scale, compliance, or multi-tenant signals indicate service isolation and event-driven scaling."
)
RATIONALE_MODULAR_MONOLITH = (
    "A modular monolith reduces overhead while preserving clear service boundaries for later extraction."
)

RISK_MVP = "Fast timelines risk cutting observability and testing coverage."
RISK_REALTIME = "Realtime performance depends on careful pub/sub and socket scaling."
RISK_INTEGRATION = "Third-party integration constraints can drive the data model."

NEXT_STEPS: tuple[str, ...] = (
    "Finalize domain boundaries and core user journeys.",
    "Define SLAs, latency targets, and data retention policies.",
    "Create an MVP delivery plan with clear iteration milestones.",
)


def delivery_risks(signals: SignalSet) -> list[str]:
    risks: list[str] = []
    if signals.mvp:
        risks.append(RISK_MVP)
    if signals.realtime:
        risks.append(RISK_REALTIME)
    if signals.integration:
        risks.append(RISK_INTEGRATION)
    return risks


def assemble_decision(signals: SignalSet) -> Decision:
    """Combine the archetype and component plan into the final recommendation."""
    architecture = select_architecture(signals)
    rationale = (
        RATIONALE_MICROSERVICES
        if architecture == "microservices"
        else RATIONALE_MODULAR_MONOLITH
    )

    return Decision(
        architecture=architecture,
        rationale=rationale,
        components=plan_components(signals),
        risks=delivery_risks(signals),
        next_steps=list(NEXT_STEPS),
    )
